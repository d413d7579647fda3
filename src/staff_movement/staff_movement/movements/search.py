from __future__ import annotations

from typing import Iterable, List, Optional

from ..common.datetime_utils import DateLike, is_within_inclusive, normalize_to_midnight
from ..common.ids import canonical_id
from .model import MovementRecord


def movements_of(movements: Optional[Iterable[MovementRecord]], staff_id) -> List[MovementRecord]:
    """Movements owned by ``staff_id``, in input order.

    Ids are compared in canonical string form so ``7`` and ``"7"`` match.
    """
    if not movements:
        return []
    wanted = canonical_id(staff_id)
    return [m for m in movements if canonical_id(m.staff_id) == wanted]


def sort_most_recent_first(movements: Iterable[MovementRecord]) -> List[MovementRecord]:
    """Stable sort by ``date_out`` descending; unparseable dates sink to the end."""

    def _key(m: MovementRecord):
        try:
            return (1, normalize_to_midnight(m.date_out).toordinal())
        except (TypeError, ValueError):
            return (0, 0)

    return sorted(movements, key=_key, reverse=True)


def first_covering(movements: Optional[Iterable[MovementRecord]], target_date: DateLike) -> Optional[MovementRecord]:
    """First movement, in input order, whose range covers ``target_date``."""
    for m in movements or ():
        if is_within_inclusive(target_date, m.date_out, m.date_return):
            return m
    return None


def find_covering(
    movements: Optional[Iterable[MovementRecord]],
    staff_id,
    target_date: DateLike,
) -> Optional[MovementRecord]:
    """Return the first movement of ``staff_id`` whose range covers ``target_date``.

    Input order decides ties; callers wanting the most recent record should
    sort with :func:`sort_most_recent_first` first. ``None`` means the staff
    member is in the office on that date.
    """
    return first_covering(movements_of(movements, staff_id), target_date)
