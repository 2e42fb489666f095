from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import EmployeeType
from .calculator.base import PayrollCalculator
from .calculator.daily_rate_calculator import DailyRateCalculator
from .calculator.production_calculator import ProductionCalculator
from .rates import PayrollRates


@dataclass
class PayrollCalculatorFactory:
    """Factory Pattern: choose the payroll formula for an employee type.

    Unknown types get no calculator; callers pass those rows through.
    """

    rates: PayrollRates = field(default_factory=PayrollRates)

    def __post_init__(self) -> None:
        self._by_type: dict[EmployeeType, PayrollCalculator] = {
            EmployeeType.PRODUCTION: ProductionCalculator(self.rates),
            EmployeeType.DAILY_RATE: DailyRateCalculator(self.rates),
        }

    def for_type(self, employee_type: EmployeeType) -> Optional[PayrollCalculator]:
        return self._by_type.get(employee_type)
