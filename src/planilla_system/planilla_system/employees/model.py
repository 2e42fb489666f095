from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.numbers import ZERO
from ..core.enums import EmployeeType


@dataclass(frozen=True)
class Employee:
    """Domain entity: worker on the payroll.

    ``monthly_salary`` only matters for daily-rate employees.
    """

    employee_id: int
    national_id: str
    name: str
    employee_type: EmployeeType
    monthly_salary: Decimal = ZERO
    is_active: bool = True
