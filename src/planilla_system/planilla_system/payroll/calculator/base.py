from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from ...attendance.model import AttendanceReportRow
from ...common.numbers import ZERO
from ...core.enums import EmployeeType
from ..rates import PayrollRates


@dataclass(frozen=True)
class PeriodTotals:
    """Additive attendance inputs for one employee over a period.

    A single record is a period with ``days_worked == 1``. ``stored`` holds
    the sum of the monetary fields persisted at exit when the totals come
    from saved records; it is None for inputs not yet persisted.
    """

    days_worked: int = 0
    hours_extra: Decimal = ZERO
    despalillo: Decimal = ZERO
    escogida: Decimal = ZERO
    monado: Decimal = ZERO
    monthly_salary: Decimal = ZERO
    stored: Optional["DerivedFields"] = None

    @classmethod
    def from_rows(cls, rows: Iterable[AttendanceReportRow]) -> "PeriodTotals":
        days = 0
        hours = despalillo = escogida = monado = ZERO
        stored = DerivedFields()
        salary: Optional[Decimal] = None
        for r in rows:
            days += 1
            hours += r.hours_extra
            despalillo += r.despalillo
            escogida += r.escogida
            monado += r.monado
            stored = stored + DerivedFields(
                t_despalillo=r.t_despalillo,
                t_escogida=r.t_escogida,
                t_monado=r.t_monado,
                prop_sabado=r.prop_sabado,
                septimo_dia=r.septimo_dia,
            )
            if salary is None:
                salary = r.monthly_salary
        return cls(
            days_worked=days,
            hours_extra=hours,
            despalillo=despalillo,
            escogida=escogida,
            monado=monado,
            monthly_salary=salary if salary is not None else ZERO,
            stored=stored,
        )


@dataclass(frozen=True)
class DerivedFields:
    """Monetary fields persisted on a record when it is closed."""

    t_despalillo: Decimal = ZERO
    t_escogida: Decimal = ZERO
    t_monado: Decimal = ZERO
    prop_sabado: Decimal = ZERO
    septimo_dia: Decimal = ZERO

    def __add__(self, other: "DerivedFields") -> "DerivedFields":
        return DerivedFields(
            t_despalillo=self.t_despalillo + other.t_despalillo,
            t_escogida=self.t_escogida + other.t_escogida,
            t_monado=self.t_monado + other.t_monado,
            prop_sabado=self.prop_sabado + other.prop_sabado,
            septimo_dia=self.septimo_dia + other.septimo_dia,
        )


class PayBreakdown(ABC):
    net_pay: Decimal

    @abstractmethod
    def as_dict(self) -> dict:
        raise NotImplementedError


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    employee_type: EmployeeType

    def __init__(self, rates: Optional[PayrollRates] = None):
        self.rates = rates or PayrollRates()

    @abstractmethod
    def exit_fields(self, totals: PeriodTotals) -> DerivedFields:
        """Fields stored on the record at exit time."""
        raise NotImplementedError

    @abstractmethod
    def period_pay(self, totals: PeriodTotals) -> PayBreakdown:
        """Pay for already-summed period inputs."""
        raise NotImplementedError
