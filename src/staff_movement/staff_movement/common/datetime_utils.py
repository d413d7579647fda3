from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import DISPLAY_EMPTY, ISO_DATE_FORMAT
from ..core.enums import MovementTimeStatus

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Longer ISO timestamps (``2024-01-09T16:00:00.000Z``) are what
    spreadsheet-backed stores return for date cells. They are converted to
    the local calendar day, so a UTC instant just before local midnight
    still reads as the day that was entered.
    """
    value = value.strip()
    if len(value) > 10 and value[10] in ("T", " "):
        try:
            stamp = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            value = value[:10]
        else:
            if stamp.tzinfo is not None:
                stamp = stamp.astimezone()
            return stamp.date()
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def normalize_to_midnight(value: DateLike) -> date:
    """Strip time of day so only the calendar date takes part in comparisons."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise TypeError(f"Unsupported date value: {value!r}")


def is_within_inclusive(target: DateLike, start: DateLike, end: DateLike) -> bool:
    """Return True when ``start <= target <= end`` on calendar dates.

    A bound that cannot be parsed never covers anything.
    """
    try:
        t = normalize_to_midnight(target)
        lo = normalize_to_midnight(start)
        hi = normalize_to_midnight(end)
    except (TypeError, ValueError):
        return False
    return lo <= t <= hi


def format_display(date_str: str) -> str:
    """Reformat ``YYYY-MM-DD`` as ``DD/MM/YYYY``.

    Empty input renders as ``-``; anything that does not split into exactly
    three parts is returned unchanged.
    """
    if not date_str:
        return DISPLAY_EMPTY
    parts = date_str.split("-")
    if len(parts) != 3:
        return date_str
    return f"{parts[2]}/{parts[1]}/{parts[0]}"


def movement_time_status(date_out: DateLike, date_return: DateLike, reference: DateLike) -> MovementTimeStatus:
    ref = normalize_to_midnight(reference)
    if ref > normalize_to_midnight(date_return):
        return MovementTimeStatus.PAST
    if ref < normalize_to_midnight(date_out):
        return MovementTimeStatus.UPCOMING
    return MovementTimeStatus.ONGOING
