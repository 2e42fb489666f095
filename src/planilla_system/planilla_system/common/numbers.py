"""Lenient numeric coercion and money rounding.

Optional numeric inputs never fail a request: anything absent, blank,
non-numeric, non-finite or negative becomes ``Decimal("0")``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")
_CENTS = Decimal(1).scaleb(-MONEY_PLACES)


def to_decimal(value: object) -> Decimal:
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        parsed = value
    else:
        try:
            parsed = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return ZERO
    if not parsed.is_finite() or parsed < 0:
        return ZERO
    return parsed


def round_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


def money(value: Optional[Decimal]) -> float:
    """Exposure format: 2 decimals, JSON-friendly."""
    if value is None:
        return 0.0
    return float(round_money(value))
