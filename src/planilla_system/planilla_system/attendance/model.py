from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.numbers import ZERO, to_decimal
from ..core.enums import AttendanceState, EmployeeType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    attendance_id: int
    employee_id: int
    work_date: date
    entry_time: datetime
    exit_time: Optional[datetime] = None
    hours_extra: Decimal = ZERO
    despalillo: Decimal = ZERO
    escogida: Decimal = ZERO
    monado: Decimal = ZERO
    t_despalillo: Decimal = ZERO
    t_escogida: Decimal = ZERO
    t_monado: Decimal = ZERO
    prop_sabado: Decimal = ZERO
    septimo_dia: Decimal = ZERO
    # Type and salary the record was paid under; None until stamped.
    employee_type: Optional[EmployeeType] = None
    monthly_salary: Optional[Decimal] = None

    @property
    def state(self) -> AttendanceState:
        return AttendanceState.ACTIVE if self.exit_time is None else AttendanceState.COMPLETED


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports: a record joined with employee master data.

    ``employee_type`` and ``monthly_salary`` are the values stored on the
    record, falling back to the employee's current ones only for records
    that carry none.
    """

    attendance_id: int
    employee_id: int
    employee_name: str
    national_id: str
    employee_type: EmployeeType
    type_label: str
    monthly_salary: Decimal
    work_date: date
    entry_time: datetime
    exit_time: Optional[datetime] = None
    hours_extra: Decimal = ZERO
    despalillo: Decimal = ZERO
    escogida: Decimal = ZERO
    monado: Decimal = ZERO
    t_despalillo: Decimal = ZERO
    t_escogida: Decimal = ZERO
    t_monado: Decimal = ZERO
    prop_sabado: Decimal = ZERO
    septimo_dia: Decimal = ZERO

    @property
    def state(self) -> AttendanceState:
        return AttendanceState.ACTIVE if self.exit_time is None else AttendanceState.COMPLETED

    @property
    def type_display(self) -> str:
        if self.employee_type == EmployeeType.UNKNOWN:
            return self.type_label
        return self.employee_type.value


@dataclass(frozen=True)
class ExitInputs:
    """Values captured at clock-out. Only the fields of the employee's own
    type are kept; the others are zeroed. ``employee_type`` and
    ``monthly_salary`` are stamped on the record with them."""

    hours_extra: Decimal = ZERO
    despalillo: Decimal = ZERO
    escogida: Decimal = ZERO
    monado: Decimal = ZERO
    employee_type: EmployeeType = EmployeeType.UNKNOWN
    monthly_salary: Decimal = ZERO

    @classmethod
    def for_type(
        cls,
        employee_type: EmployeeType,
        *,
        hours_extra: object = None,
        despalillo: object = None,
        escogida: object = None,
        monado: object = None,
        monthly_salary: object = None,
    ) -> "ExitInputs":
        if employee_type == EmployeeType.DAILY_RATE:
            return cls(
                hours_extra=to_decimal(hours_extra),
                employee_type=employee_type,
                monthly_salary=to_decimal(monthly_salary),
            )
        if employee_type == EmployeeType.PRODUCTION:
            return cls(
                despalillo=to_decimal(despalillo),
                escogida=to_decimal(escogida),
                monado=to_decimal(monado),
                employee_type=employee_type,
            )
        return cls(employee_type=employee_type)
