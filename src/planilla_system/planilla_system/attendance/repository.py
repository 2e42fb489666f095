from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeType
from ..payroll.calculator.base import DerivedFields
from .model import AttendanceRecord, AttendanceReportRow, ExitInputs


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        entry_time: datetime,
        employee_type: EmployeeType,
    ) -> int:
        """Insert an open record stamped with the employee's type.

        Raises ConflictError when (employee_id, work_date) already exists.
        """

        raise NotImplementedError

    def update_exit(
        self,
        *,
        attendance_id: int,
        exit_time: datetime,
        inputs: ExitInputs,
        derived: DerivedFields,
    ) -> bool:
        """Close an open record and stamp ``inputs.employee_type`` on it;
        False when it was already closed."""

        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
        completed_only: bool = False,
    ) -> Sequence[AttendanceReportRow]:
        """Records of active employees in [start_date, end_date],
        ordered by employee name then date."""

        raise NotImplementedError
