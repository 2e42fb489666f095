from decimal import Decimal

import pytest

from src.planilla_system.planilla_system.core.enums import EmployeeType
from src.planilla_system.planilla_system.payroll.calculator.base import PeriodTotals
from src.planilla_system.planilla_system.payroll.calculator.daily_rate_calculator import DailyRateCalculator
from src.planilla_system.planilla_system.payroll.calculator.production_calculator import ProductionCalculator
from src.planilla_system.planilla_system.payroll.factory import PayrollCalculatorFactory
from src.planilla_system.planilla_system.payroll.rates import PayrollRates


def test_factory_returns_calculator_per_type():
    factory = PayrollCalculatorFactory()

    assert isinstance(factory.for_type(EmployeeType.PRODUCTION), ProductionCalculator)
    assert isinstance(factory.for_type(EmployeeType.DAILY_RATE), DailyRateCalculator)
    assert factory.for_type(EmployeeType.UNKNOWN) is None


def test_overrides_flow_into_calculators():
    rates = PayrollRates.from_overrides({"despalillo_rate": "100", "seventh_day_min_days": "6"})
    factory = PayrollCalculatorFactory(rates=rates)

    production = factory.for_type(EmployeeType.PRODUCTION).period_pay(PeriodTotals(days_worked=1, despalillo=Decimal("1")))
    daily = factory.for_type(EmployeeType.DAILY_RATE).period_pay(
        PeriodTotals(days_worked=5, monthly_salary=Decimal("9000"))
    )

    assert production.t_despalillo == Decimal("100")
    assert daily.seventh_day == 0


def test_unknown_override_is_rejected():
    with pytest.raises(ValueError):
        PayrollRates.from_overrides({"bonus": "1"})


def test_non_positive_divisors_are_rejected():
    with pytest.raises(ValueError):
        PayrollRates.from_overrides({"days_per_month": "0"})


@pytest.mark.parametrize(
    "label,expected",
    [
        ("Producción", EmployeeType.PRODUCTION),
        ("produccion", EmployeeType.PRODUCTION),
        ("Al Día", EmployeeType.DAILY_RATE),
        ("al dia", EmployeeType.DAILY_RATE),
        ("Temporal", EmployeeType.UNKNOWN),
        (None, EmployeeType.UNKNOWN),
    ],
)
def test_type_labels_normalize(label, expected):
    assert EmployeeType.from_label(label) == expected
