from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeType
from .model import Employee


class EmployeeRepository(Protocol):
    """Employee registry port. Services depend on this, not on MySQL."""

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Any employee, active or not."""

        raise NotImplementedError

    def get_active_by_national_id(self, national_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def count_active(self) -> int:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        national_id: str,
        name: str,
        employee_type: EmployeeType,
        monthly_salary: Decimal,
    ) -> int:
        raise NotImplementedError

    def update_employee(
        self,
        *,
        employee_id: int,
        national_id: str,
        name: str,
        employee_type: EmployeeType,
        monthly_salary: Decimal,
    ) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
