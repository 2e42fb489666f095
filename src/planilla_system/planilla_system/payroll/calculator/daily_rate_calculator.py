from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...common.numbers import ZERO, money
from ...core.enums import EmployeeType
from .base import DerivedFields, PayBreakdown, PayrollCalculator, PeriodTotals


@dataclass(frozen=True)
class DailyRatePay(PayBreakdown):
    days_worked: int
    hours_extra: Decimal
    daily_salary: Decimal
    normal_hour_value: Decimal
    overtime_hour_value: Decimal
    overtime_money: Decimal
    base_pay: Decimal
    seventh_day: Decimal
    net_pay: Decimal

    def as_dict(self) -> dict:
        return {
            "dias_trabajados": self.days_worked,
            "horas_extra": money(self.hours_extra),
            "salario_diario": money(self.daily_salary),
            "valor_hora": money(self.normal_hour_value),
            "valor_hora_extra": money(self.overtime_hour_value),
            "horas_extra_dinero": money(self.overtime_money),
            "salario_base": money(self.base_pay),
            "septimo_dia": money(self.seventh_day),
            "neto_pagar": money(self.net_pay),
        }


class DailyRateCalculator(PayrollCalculator):
    """Daily-rate ("Al Día") rule: flat daily rate per attended day, overtime at a
    premium hourly rate, and one seventh-day payment once the period
    reaches the worked-days threshold."""

    employee_type = EmployeeType.DAILY_RATE

    def exit_fields(self, totals: PeriodTotals) -> DerivedFields:
        # Only hours_extra is stored for daily-rate records.
        return DerivedFields()

    def period_pay(self, totals: PeriodTotals) -> DailyRatePay:
        r = self.rates
        daily_salary = totals.monthly_salary / r.days_per_month
        normal_hour_value = daily_salary / r.hours_per_day
        overtime_hour_value = normal_hour_value * r.overtime_multiplier
        overtime_money = totals.hours_extra * overtime_hour_value
        seventh_day = daily_salary if totals.days_worked >= r.seventh_day_min_days else ZERO
        base_pay = totals.days_worked * daily_salary
        return DailyRatePay(
            days_worked=totals.days_worked,
            hours_extra=totals.hours_extra,
            daily_salary=daily_salary,
            normal_hour_value=normal_hour_value,
            overtime_hour_value=overtime_hour_value,
            overtime_money=overtime_money,
            base_pay=base_pay,
            seventh_day=seventh_day,
            net_pay=base_pay + overtime_money + seventh_day,
        )
