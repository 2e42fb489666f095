from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, username, password_hash, role, is_active, created_at, updated_at"


def _to_user(row: dict[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE user_id=%s AND is_active=1",
                (user_id,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE username=%s AND is_active=1",
                (username,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def list_active(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE is_active=1 ORDER BY created_at DESC")
            return [_to_user(r) for r in fetchall(cur)]

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, password_hash, role, is_active)
                VALUES(%s,%s,%s,1)
                """,
                (username, password_hash, role.value),
            )
            return int(cur.lastrowid)

    def update_user(
        self,
        *,
        user_id: int,
        username: str,
        role: Role,
        password_hash: Optional[str] = None,
    ) -> bool:
        sets = ["username=%s", "role=%s", "updated_at=NOW()"]
        params: list[object] = [username, role.value]
        if password_hash is not None:
            sets.append("password_hash=%s")
            params.append(password_hash)
        params.append(int(user_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE users SET {', '.join(sets)} WHERE user_id=%s AND is_active=1",
                tuple(params),
            )
            return cur.rowcount > 0

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET is_active=%s, updated_at=NOW() WHERE user_id=%s",
                (1 if is_active else 0, int(user_id)),
            )
            return cur.rowcount > 0
