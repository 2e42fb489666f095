from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...common.numbers import money
from ...core.enums import EmployeeType
from .base import DerivedFields, PayBreakdown, PayrollCalculator, PeriodTotals


@dataclass(frozen=True)
class ProductionPay(PayBreakdown):
    days_worked: int
    despalillo: Decimal
    escogida: Decimal
    monado: Decimal
    t_despalillo: Decimal
    t_escogida: Decimal
    t_monado: Decimal
    total: Decimal
    saturday_bonus: Decimal
    seventh_day: Decimal
    net_pay: Decimal

    def as_dict(self) -> dict:
        return {
            "dias_trabajados": self.days_worked,
            "despalillo": money(self.despalillo),
            "escogida": money(self.escogida),
            "monado": money(self.monado),
            "t_despalillo": money(self.t_despalillo),
            "t_escogida": money(self.t_escogida),
            "t_monado": money(self.t_monado),
            "total_produccion": money(self.total),
            "prop_sabado": money(self.saturday_bonus),
            "septimo_dia": money(self.seventh_day),
            "neto_pagar": money(self.net_pay),
        }


class ProductionCalculator(PayrollCalculator):
    """Piece-rate rule: three tasks at fixed unit prices plus statutory
    Saturday and seventh-day supplements proportional to the piece total."""

    employee_type = EmployeeType.PRODUCTION

    def _pieces(self, totals: PeriodTotals) -> tuple[Decimal, Decimal, Decimal]:
        r = self.rates
        return (
            totals.despalillo * r.despalillo_rate,
            totals.escogida * r.escogida_rate,
            totals.monado * r.monado_rate,
        )

    def exit_fields(self, totals: PeriodTotals) -> DerivedFields:
        t_desp, t_esco, t_mona = self._pieces(totals)
        total = t_desp + t_esco + t_mona
        return DerivedFields(
            t_despalillo=t_desp,
            t_escogida=t_esco,
            t_monado=t_mona,
            prop_sabado=total * self.rates.saturday_bonus_factor,
            septimo_dia=total * self.rates.seventh_day_factor,
        )

    def period_pay(self, totals: PeriodTotals) -> ProductionPay:
        # Saved records are paid at the amounts fixed when they were closed.
        derived = totals.stored if totals.stored is not None else self.exit_fields(totals)
        t_desp, t_esco, t_mona = derived.t_despalillo, derived.t_escogida, derived.t_monado
        total = t_desp + t_esco + t_mona
        saturday_bonus = derived.prop_sabado
        seventh_day = derived.septimo_dia
        return ProductionPay(
            days_worked=totals.days_worked,
            despalillo=totals.despalillo,
            escogida=totals.escogida,
            monado=totals.monado,
            t_despalillo=t_desp,
            t_escogida=t_esco,
            t_monado=t_mona,
            total=total,
            saturday_bonus=saturday_bonus,
            seventh_day=seventh_day,
            net_pay=total + saturday_bonus + seventh_day,
        )
