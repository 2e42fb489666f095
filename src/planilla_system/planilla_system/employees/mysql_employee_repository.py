from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.numbers import to_decimal
from ..core.enums import EmployeeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        national_id=row["national_id"],
        name=row["name"],
        employee_type=EmployeeType.from_label(row.get("employee_type")),
        monthly_salary=to_decimal(row.get("monthly_salary")),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, national_id, name, employee_type, monthly_salary, is_active
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_active_by_national_id(self, national_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, national_id, name, employee_type, monthly_salary, is_active
                FROM employees
                WHERE national_id=%s AND is_active=1
                """,
                (national_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, national_id, name, employee_type, monthly_salary, is_active
                FROM employees
                WHERE is_active=1
                ORDER BY employee_id DESC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def count_active(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees WHERE is_active=1")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def create_employee(
        self,
        *,
        national_id: str,
        name: str,
        employee_type: EmployeeType,
        monthly_salary: Decimal,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(national_id, name, employee_type, monthly_salary, is_active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (national_id, name, employee_type.value, monthly_salary),
            )
            return int(cur.lastrowid)

    def update_employee(
        self,
        *,
        employee_id: int,
        national_id: str,
        name: str,
        employee_type: EmployeeType,
        monthly_salary: Decimal,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET national_id=%s, name=%s, employee_type=%s, monthly_salary=%s
                WHERE employee_id=%s AND is_active=1
                """,
                (national_id, name, employee_type.value, monthly_salary, int(employee_id)),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s WHERE employee_id=%s",
                (1 if is_active else 0, int(employee_id)),
            )
            return cur.rowcount > 0
