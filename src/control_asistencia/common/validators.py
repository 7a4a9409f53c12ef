from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return value.strip()


def require_int(value, field_name: str) -> int:
    # bool is an int subclass; 3.9 would silently truncate to 3
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} no es válido")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no es válido")
