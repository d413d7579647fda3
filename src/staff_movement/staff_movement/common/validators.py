from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_iso_date(value: Optional[str], field_name: str) -> date:
    raw = require_non_empty(value, field_name)
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def require_date_range(date_out: Optional[str], date_return: Optional[str]) -> tuple[date, date]:
    start = require_iso_date(date_out, "Date out")
    end = require_iso_date(date_return, "Date of return")
    if start > end:
        raise ValidationError("Date of return cannot be earlier than date out")
    return start, end
