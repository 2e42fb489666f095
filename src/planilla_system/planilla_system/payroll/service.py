from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_timestamp, month_bounds
from ..common.numbers import ZERO, money
from ..core.enums import EmployeeType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import PeriodTotals
from .factory import PayrollCalculatorFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyReport:
    production: list[dict] = field(default_factory=list)
    al_dia: list[dict] = field(default_factory=list)
    summary: dict = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {"production": self.production, "alDia": self.al_dia, "summary": self.summary}


def _identity_row(r: AttendanceReportRow) -> dict:
    return {
        "id": r.attendance_id,
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "employee_type": r.type_display,
        "monthly_salary": money(r.monthly_salary),
        "date": r.work_date.isoformat(),
        "entry_time": format_timestamp(r.entry_time),
        "exit_time": format_timestamp(r.exit_time),
        "status": r.state.value,
    }


def _base_row(r: AttendanceReportRow) -> dict:
    """Stored values as-is, for listings and rows with no formula."""
    return {
        **_identity_row(r),
        "hours_extra": money(r.hours_extra),
        "despalillo": money(r.despalillo),
        "escogida": money(r.escogida),
        "monado": money(r.monado),
        "t_despalillo": money(r.t_despalillo),
        "t_escogida": money(r.t_escogida),
        "t_monado": money(r.t_monado),
        "prop_sabado": money(r.prop_sabado),
        "septimo_dia": money(r.septimo_dia),
    }


def _summary(production_net: Sequence[Decimal], al_dia_net: Sequence[Decimal]) -> dict:
    production_total = sum(production_net, ZERO)
    al_dia_total = sum(al_dia_net, ZERO)
    return {
        "total_employees": len(production_net) + len(al_dia_net),
        "total_payroll": money(production_total + al_dia_total),
        "total_production_employees": len(production_net),
        "total_production_payroll": money(production_total),
        "total_aldia_employees": len(al_dia_net),
        "total_aldia_payroll": money(al_dia_total),
    }


class PayrollReportService:
    """Joins attendance with employee data and runs the payroll formulas.

    - daily: one computed row per record (``days_worked = 1``).
    - weekly: per-employee aggregation; additive inputs are summed first,
      then the seventh-day threshold is tested on the summed days.
    - monthly: raw per-day rows, no aggregation.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: Optional[EmployeeRepository] = None,
        *,
        calculators: Optional[PayrollCalculatorFactory] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculators = calculators or PayrollCalculatorFactory()

    def daily_report(self, *, day: date) -> list[dict]:
        rows = self._attendance.get_report_rows(start_date=day, end_date=day)

        out: list[dict] = []
        for r in rows:
            calculator = self._calculators.for_type(r.employee_type)
            if calculator is None:
                out.append(_base_row(r))
                continue
            pay = calculator.period_pay(PeriodTotals.from_rows([r]))
            out.append({**_identity_row(r), **pay.as_dict()})
        return out

    def weekly_report(self, *, start: date, end: date) -> WeeklyReport:
        if end < start:
            raise ValidationError("'end' no puede ser anterior a 'start'.")

        rows = self._attendance.get_report_rows(start_date=start, end_date=end)

        production: list[dict] = []
        al_dia: list[dict] = []
        production_net: list[Decimal] = []
        al_dia_net: list[Decimal] = []

        for employee_rows in self._group_by_employee(rows):
            first = employee_rows[0]
            calculator = self._calculators.for_type(first.employee_type)
            if not calculator:
                logger.warning(
                    "weekly report skips employee=%s with unknown type %r",
                    first.employee_id,
                    first.type_label,
                )
                continue

            pay = calculator.period_pay(PeriodTotals.from_rows(employee_rows))
            row = {
                "employee_id": first.employee_id,
                "employee_name": first.employee_name,
                "employee_type": first.type_display,
                "monthly_salary": money(first.monthly_salary),
                "start": start.isoformat(),
                "end": end.isoformat(),
                **pay.as_dict(),
            }

            if first.employee_type == EmployeeType.PRODUCTION:
                production.append(row)
                production_net.append(pay.net_pay)
            else:
                al_dia.append(row)
                al_dia_net.append(pay.net_pay)

        return WeeklyReport(production=production, al_dia=al_dia, summary=_summary(production_net, al_dia_net))

    def monthly_report(self, *, year: int, month: int) -> list[dict]:
        start, end = month_bounds(year, month)
        rows = self._attendance.get_report_rows(start_date=start, end_date=end)
        return [_base_row(r) for r in rows]

    def employee_stats(self, employee_id: int, *, year: int, month: int) -> dict:
        """Month-to-date pay for one employee over completed records."""
        if self._employees is None:
            raise RuntimeError("employee_stats requires an employee repository")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Empleado no encontrado")

        start, end = month_bounds(year, month)
        rows = self._attendance.get_report_rows(
            start_date=start,
            end_date=end,
            employee_id=employee.employee_id,
            completed_only=True,
        )

        out = {
            "employee_id": employee.employee_id,
            "employee_name": employee.name,
            "type": employee.employee_type.value,
            "year": int(year),
            "month": int(month),
        }
        current = [r for r in rows if r.employee_type == employee.employee_type]
        calculator = self._calculators.for_type(employee.employee_type)
        if calculator:
            out.update(calculator.period_pay(PeriodTotals.from_rows(current)).as_dict())

        # Days paid under a type the employee no longer has keep their own formula.
        previous = []
        for group in self._group_by_employee(r for r in rows if r.employee_type != employee.employee_type):
            old = self._calculators.for_type(group[0].employee_type)
            if old:
                previous.append({"type": group[0].type_display, **old.period_pay(PeriodTotals.from_rows(group)).as_dict()})
        if previous:
            out["previous_types"] = previous
        return out

    @staticmethod
    def _group_by_employee(rows: Iterable[AttendanceReportRow]) -> list[list[AttendanceReportRow]]:
        # An employee whose type changed shows up once per type the records were paid under.
        groups: dict[tuple[int, EmployeeType], list[AttendanceReportRow]] = {}
        for r in rows:
            groups.setdefault((r.employee_id, r.employee_type), []).append(r)
        return list(groups.values())
