from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_iso_date_label, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: str, field_name: str = "date") -> str:
    """Return value unchanged if it is a real calendar date in YYYY-MM-DD form."""
    if not isinstance(value, str) or not is_iso_date_label(value):
        raise ValidationError(f"{field_name} must be YYYY-MM-DD, got {value!r}")
    try:
        parse_iso_date(value)
    except ValueError as e:
        raise ValidationError(f"{field_name} is not a calendar date: {value!r}") from e
    return value
