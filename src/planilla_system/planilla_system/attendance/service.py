from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import format_clock, format_timestamp, now_local
from ..common.numbers import money
from ..core.enums import AttendanceState
from ..core.exceptions import ConflictError, NotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import DerivedFields, PeriodTotals
from ..payroll.factory import PayrollCalculatorFactory
from .model import AttendanceReportRow, ExitInputs
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_STATUS_TEXT = {
    AttendanceState.ACTIVE: "En Trabajo",
    AttendanceState.COMPLETED: "Completado",
}


class AttendanceService:
    """Clock-in / clock-out state machine per (employee, day).

    NoRecord -> Active (entry) -> Completed (exit). Completed is terminal.
    Uniqueness and the open-session guard are enforced again by the
    repository (unique key, conditional update) so concurrent requests for
    the same employee cannot double-enter or double-exit.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculators: Optional[PayrollCalculatorFactory] = None,
        timezone: Optional[tzinfo] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculators = calculators or PayrollCalculatorFactory()
        self._tz = timezone

    def today(self) -> date:
        return now_local(self._tz).date()

    def record_entry(self, employee_id: int, *, now: datetime | None = None) -> dict:
        now = now or now_local(self._tz)
        today = now.date()

        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Empleado no encontrado o inactivo")

        existing = self._attendance.get_for_employee_and_date(employee.employee_id, today)
        if existing:
            if existing.state == AttendanceState.ACTIVE:
                raise ConflictError("Ya existe una entrada activa para hoy. Registre la salida primero.")
            raise ConflictError("El empleado ya completó su jornada hoy.")

        attendance_id = self._attendance.create_entry(
            employee_id=employee.employee_id,
            work_date=today,
            entry_time=now,
            employee_type=employee.employee_type,
        )
        logger.info("entry recorded employee=%s date=%s", employee.employee_id, today)

        return {
            "id": attendance_id,
            "employee_id": employee.employee_id,
            "employee_name": employee.name,
            "employee_type": employee.employee_type.value,
            "date": today.isoformat(),
            "entry_time": format_timestamp(now),
            "status": AttendanceState.ACTIVE.value,
        }

    def record_exit(
        self,
        employee_id: int,
        *,
        hours_extra: object = None,
        despalillo: object = None,
        escogida: object = None,
        monado: object = None,
        now: datetime | None = None,
    ) -> dict:
        now = now or now_local(self._tz)
        today = now.date()

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Empleado no encontrado")
        if not employee.is_active:
            raise NotFoundError("Empleado está inactivo")

        record = self._attendance.get_for_employee_and_date(employee.employee_id, today)
        if not record or record.state != AttendanceState.ACTIVE:
            raise ConflictError("No existe entrada pendiente para hoy.")

        inputs = ExitInputs.for_type(
            employee.employee_type,
            hours_extra=hours_extra,
            despalillo=despalillo,
            escogida=escogida,
            monado=monado,
            monthly_salary=employee.monthly_salary,
        )
        calculator = self._calculators.for_type(employee.employee_type)
        if calculator:
            derived = calculator.exit_fields(
                PeriodTotals(
                    days_worked=1,
                    hours_extra=inputs.hours_extra,
                    despalillo=inputs.despalillo,
                    escogida=inputs.escogida,
                    monado=inputs.monado,
                    monthly_salary=employee.monthly_salary,
                )
            )
        else:
            logger.warning("exit for employee=%s with unknown type, no pay fields", employee.employee_id)
            derived = DerivedFields()

        if not self._attendance.update_exit(
            attendance_id=record.attendance_id,
            exit_time=now,
            inputs=inputs,
            derived=derived,
        ):
            raise ConflictError("No existe entrada pendiente para hoy.")
        logger.info("exit recorded employee=%s date=%s", employee.employee_id, today)

        return {
            "employee_id": employee.employee_id,
            "employee_name": employee.name,
            "employee_type": employee.employee_type.value,
            "date": today.isoformat(),
            "entry_time": format_timestamp(record.entry_time),
            "exit_time": format_timestamp(now),
            "hours_extra": money(inputs.hours_extra),
            "despalillo": money(inputs.despalillo),
            "escogida": money(inputs.escogida),
            "monado": money(inputs.monado),
            "t_despalillo": money(derived.t_despalillo),
            "t_escogida": money(derived.t_escogida),
            "t_monado": money(derived.t_monado),
            "prop_sabado": money(derived.prop_sabado),
            "septimo_dia": money(derived.septimo_dia),
            "status": AttendanceState.COMPLETED.value,
        }

    def today_records(self, *, today: date | None = None) -> list[dict]:
        today = today or self.today()
        rows = self._attendance.get_report_rows(start_date=today, end_date=today)
        ordered = sorted(rows, key=lambda r: r.entry_time, reverse=True)
        return [self._to_ui(r) for r in ordered]

    def _to_ui(self, r: AttendanceReportRow) -> dict:
        return {
            "id": r.attendance_id,
            "employee_id": r.employee_id,
            "employee_name": r.employee_name,
            "employee_dni": r.national_id,
            "employee_type": r.type_display,
            "date": r.work_date.isoformat(),
            "entry_time": format_timestamp(r.entry_time),
            "exit_time": format_timestamp(r.exit_time),
            "entry_time_display": format_clock(r.entry_time),
            "exit_time_display": format_clock(r.exit_time),
            "hours_extra": money(r.hours_extra),
            "despalillo": money(r.despalillo),
            "escogida": money(r.escogida),
            "monado": money(r.monado),
            "status": r.state.value,
            "status_text": _STATUS_TEXT[r.state],
        }
