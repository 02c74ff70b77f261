from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import format_hhmm, parse_hhmm


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} phải lớn hơn 0")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} không được âm")
    return value


def require_hhmm(value: str, field_name: str) -> str:
    """Validate an "HH:MM" time-of-day string and return it normalized."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    try:
        minutes = parse_hhmm(value)
    except ValueError:
        raise ValidationError(f"{field_name} phải có dạng HH:MM") from None
    return format_hhmm(minutes)
