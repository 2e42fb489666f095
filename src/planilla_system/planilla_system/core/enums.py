from __future__ import annotations

import unicodedata
from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    SCANNER = "scanner"
    VIEWER = "viewer"


def _fold(value: str) -> str:
    # "Producción" -> "produccion", "Al Día" -> "al dia"
    decomposed = unicodedata.normalize("NFKD", value)
    plain = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(plain.replace("_", " ").replace("-", " ").lower().split())


class EmployeeType(str, Enum):
    """Compensation model. Selects which payroll formula applies."""

    PRODUCTION = "Producción"
    DAILY_RATE = "Al Día"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_label(cls, value: object) -> "EmployeeType":
        """Normalize any stored/submitted label to a member.

        Labels that match neither model resolve to ``UNKNOWN``.
        """
        if isinstance(value, EmployeeType):
            return value
        if value is None:
            return cls.UNKNOWN
        folded = _fold(str(value))
        if folded in _PRODUCTION_LABELS:
            return cls.PRODUCTION
        if folded in _DAILY_RATE_LABELS:
            return cls.DAILY_RATE
        return cls.UNKNOWN


_PRODUCTION_LABELS = {"produccion", "production"}
_DAILY_RATE_LABELS = {"al dia", "aldia", "daily rate", "dailyrate", "daily"}


class AttendanceState(str, Enum):
    """Lifecycle of one (employee, day) attendance record."""

    ACTIVE = "active"
    COMPLETED = "completed"
