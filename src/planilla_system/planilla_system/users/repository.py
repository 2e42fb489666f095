from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """User repository port.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Active users only."""

        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        """Active users only."""

        raise NotImplementedError

    def list_active(self) -> Sequence[User]:
        raise NotImplementedError

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        raise NotImplementedError

    def update_user(
        self,
        *,
        user_id: int,
        username: str,
        role: Role,
        password_hash: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
