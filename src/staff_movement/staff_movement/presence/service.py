from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from ..common import datetime_utils
from ..common.datetime_utils import parse_iso_date
from ..core.enums import PresenceStatus
from ..core.exceptions import ValidationError
from ..movements.model import MovementRecord
from ..staff.model import StaffMember
from ..sync.scheduler import PresenceBoard
from .calculator import derive_status_for


@dataclass(frozen=True)
class PresenceRow:
    staff: StaffMember
    status: PresenceStatus
    matched_movement: Optional[MovementRecord]


@dataclass(frozen=True)
class PresenceReport:
    query_date: date
    rows: Tuple[PresenceRow, ...]

    @property
    def out_count(self) -> int:
        return sum(1 for r in self.rows if r.status == PresenceStatus.OUT_OF_OFFICE)

    @property
    def in_count(self) -> int:
        return sum(1 for r in self.rows if r.status == PresenceStatus.IN_OFFICE)


def _matches(staff: StaffMember, term: str) -> bool:
    return term in staff.name.lower() or term in staff.position.lower()


def build_presence_report(
    staff: Iterable[StaffMember],
    movements: Iterable[MovementRecord],
    query_date: date,
    search_term: str = "",
) -> PresenceReport:
    """Status of every (matching) staff member on ``query_date``.

    Movements are searched in the order given, so the first covering record wins.
    """
    movements = tuple(movements)
    term = (search_term or "").strip().lower()
    rows: List[PresenceRow] = []
    for s in staff:
        if term and not _matches(s, term):
            continue
        status, match = derive_status_for(movements, s.staff_id, query_date)
        rows.append(PresenceRow(staff=s, status=status, matched_movement=match))
    return PresenceReport(query_date=query_date, rows=tuple(rows))


class PresenceService:
    """Use case: who is in or out of the office on a chosen date."""

    def __init__(self, board: PresenceBoard):
        self._board = board

    def status_on(self, query_date: Optional[str] = None, *, search_term: str = "") -> PresenceReport:
        if query_date:
            try:
                when = parse_iso_date(query_date)
            except ValueError:
                raise ValidationError("Date must be in YYYY-MM-DD format")
        else:
            when = datetime_utils.today()

        snap = self._board.snapshot()
        if snap.is_empty:
            snap = self._board.refresh()
        return build_presence_report(snap.staff, snap.movements, when, search_term)
