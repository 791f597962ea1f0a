from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    try:
        parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return value


def require_status(value: Optional[str]) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {value!r}")
