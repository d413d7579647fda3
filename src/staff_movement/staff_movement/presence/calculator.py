from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Tuple

from ..common import datetime_utils
from ..common.datetime_utils import DateLike, normalize_to_midnight
from ..core.enums import PresenceStatus
from ..movements.model import MovementRecord
from ..movements.search import find_covering, first_covering

logger = logging.getLogger(__name__)


def _reference(reference_date: Optional[DateLike]) -> Optional[date]:
    if reference_date is None:
        return datetime_utils.today()
    try:
        return normalize_to_midnight(reference_date)
    except (TypeError, ValueError):
        logger.warning("Unreadable reference date %r; treating as in office", reference_date)
        return None


def derive_status(
    movements: Optional[Iterable[MovementRecord]],
    reference_date: Optional[DateLike] = None,
) -> PresenceStatus:
    """Status of one staff member on ``reference_date`` given their movements.

    Pure apart from reading today's date once when ``reference_date`` is omitted.
    An unreadable reference date is logged and yields ``IN_OFFICE``.
    """
    ref = _reference(reference_date)
    if ref is None or not movements:
        return PresenceStatus.IN_OFFICE
    if first_covering(movements, ref) is not None:
        return PresenceStatus.OUT_OF_OFFICE
    return PresenceStatus.IN_OFFICE


def derive_status_for(
    movements: Optional[Iterable[MovementRecord]],
    staff_id,
    reference_date: Optional[DateLike] = None,
) -> Tuple[PresenceStatus, Optional[MovementRecord]]:
    """Like :func:`derive_status` over an unfiltered collection, also returning the match."""
    ref = _reference(reference_date)
    if ref is None:
        return PresenceStatus.IN_OFFICE, None
    match = find_covering(movements, staff_id, ref)
    status = PresenceStatus.OUT_OF_OFFICE if match is not None else PresenceStatus.IN_OFFICE
    return status, match
