from decimal import Decimal

from src.planilla_system.planilla_system.payroll.calculator.base import PeriodTotals
from src.planilla_system.planilla_system.payroll.calculator.daily_rate_calculator import DailyRateCalculator


def test_six_days_with_overtime():
    pay = DailyRateCalculator().period_pay(
        PeriodTotals(days_worked=6, hours_extra=Decimal("4"), monthly_salary=Decimal("9000"))
    )
    out = pay.as_dict()

    assert out["salario_diario"] == 300.0
    assert out["valor_hora"] == 37.5
    assert out["valor_hora_extra"] == 46.88
    assert out["horas_extra_dinero"] == 187.5
    assert out["salario_base"] == 1800.0
    assert out["septimo_dia"] == 300.0
    assert out["neto_pagar"] == 2287.5


def test_seventh_day_needs_five_days():
    calc = DailyRateCalculator()
    four = calc.period_pay(PeriodTotals(days_worked=4, monthly_salary=Decimal("9000")))
    five = calc.period_pay(PeriodTotals(days_worked=5, monthly_salary=Decimal("9000")))

    assert four.seventh_day == 0
    assert four.net_pay == Decimal("1200")
    assert five.seventh_day == Decimal("300")
    assert five.net_pay == Decimal("1800")


def test_exit_fields_are_all_zero():
    derived = DailyRateCalculator().exit_fields(
        PeriodTotals(days_worked=1, hours_extra=Decimal("3"), monthly_salary=Decimal("9000"))
    )

    assert derived.t_despalillo == derived.prop_sabado == derived.septimo_dia == 0


def test_missing_salary_pays_nothing():
    pay = DailyRateCalculator().period_pay(PeriodTotals(days_worked=6, hours_extra=Decimal("2")))

    assert pay.net_pay == 0
