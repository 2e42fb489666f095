from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import Mapping, Optional


@dataclass(frozen=True)
class PayrollRates:
    """Formula constants injected into the payroll calculators.

    Piece prices are in local currency per unit produced. The Saturday
    bonus and seventh-day factors are fractions of piece-rate earnings.
    """

    despalillo_rate: Decimal = Decimal("80")
    escogida_rate: Decimal = Decimal("70")
    monado_rate: Decimal = Decimal("1")
    saturday_bonus_factor: Decimal = Decimal("0.090909")
    seventh_day_factor: Decimal = Decimal("0.181818")
    days_per_month: Decimal = Decimal("30")
    hours_per_day: Decimal = Decimal("8")
    overtime_multiplier: Decimal = Decimal("1.25")
    seventh_day_min_days: int = 5

    def __post_init__(self) -> None:
        if self.days_per_month <= 0 or self.hours_per_day <= 0:
            raise ValueError("days_per_month and hours_per_day must be positive")
        if self.seventh_day_min_days < 0:
            raise ValueError("seventh_day_min_days must not be negative")

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, object]] = None) -> "PayrollRates":
        base = cls()
        if not overrides:
            return base

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown payroll rate(s): {', '.join(sorted(unknown))}")

        values: dict[str, object] = {}
        for name, raw in overrides.items():
            if name == "seventh_day_min_days":
                values[name] = int(raw)
            else:
                values[name] = Decimal(str(raw))
        return replace(base, **values)
