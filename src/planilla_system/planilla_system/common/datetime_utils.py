from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: Optional[str], field_name: str) -> date:
    if not value or not str(value).strip():
        raise ValidationError(f"Debe enviar '{field_name}' en formato YYYY-MM-DD.")
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"'{field_name}' no tiene formato YYYY-MM-DD.")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    if not MINYEAR <= int(year) <= MAXYEAR:
        raise ValidationError(f"El año debe estar entre {MINYEAR} y {MAXYEAR}.")
    if not 1 <= int(month) <= 12:
        raise ValidationError("El mes debe estar entre 1 y 12.")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def load_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        raise ValueError(f"Unknown ATTENDANCE_TIMEZONE: {name!r}")


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock time in the attendance timezone, as naive datetime.

    Note: Wrapped so tests can patch/mock easier. MySQL DATETIME columns
    carry no zone, so the value is stored as local wall time.
    """
    if tz is None:
        return datetime.now()
    return datetime.now(tz).replace(tzinfo=None)


def format_clock(value: Optional[datetime], empty: str = "-") -> str:
    if value is None:
        return empty
    return value.strftime("%H:%M:%S")


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat(timespec="seconds")
