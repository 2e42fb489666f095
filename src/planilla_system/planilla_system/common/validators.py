from __future__ import annotations

import re

from ..core.constants import NATIONAL_ID_LENGTH
from ..core.exceptions import ValidationError

_NATIONAL_ID_RE = re.compile(rf"^\d{{{NATIONAL_ID_LENGTH}}}$")
_WHITESPACE_RE = re.compile(r"\s")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} debe tener al menos {min_len} caracteres")
    return value


def require_no_whitespace(value: str, field_name: str) -> str:
    if _WHITESPACE_RE.search(value or ""):
        raise ValidationError(f"{field_name} no puede contener espacios")
    return value


def require_national_id(value: str) -> str:
    value = (value or "").strip()
    if not _NATIONAL_ID_RE.match(value):
        raise ValidationError(f"DNI inválido ({NATIONAL_ID_LENGTH} dígitos)")
    return value


def require_int(value: object, field_name: str) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} es requerido")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} no es válido")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} no es válido")
