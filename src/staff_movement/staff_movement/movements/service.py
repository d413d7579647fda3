from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..common import datetime_utils
from ..common.datetime_utils import format_display, movement_time_status
from ..common.ids import canonical_id
from ..common.validators import require_date_range, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..store.repository import RecordStore
from .model import MovementHistoryRow, MovementListRow, MovementRecord
from .search import movements_of, sort_most_recent_first

logger = logging.getLogger(__name__)


def _optional(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


class MovementService:
    """Use case: record, list and delete staff movements."""

    def __init__(self, store: RecordStore):
        self._store = store

    def record_movement(
        self,
        *,
        actor_id: str,
        actor_role: Role,
        date_out: str,
        date_return: str,
        location: str,
        purpose: str,
        state: str = "",
        time_out: Optional[str] = None,
        time_return: Optional[str] = None,
        staff_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> MovementRecord:
        """Validate and store a movement. Nothing reaches the store if validation fails."""
        owner = (staff_id or actor_id).strip()
        if owner != actor_id and actor_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can record movements for other staff")

        start, end = require_date_range(date_out, date_return)
        fields = {
            "staff_id": owner,
            "date_out": start.isoformat(),
            "date_return": end.isoformat(),
            "time_out": _optional(time_out),
            "time_return": _optional(time_return),
            "location": require_non_empty(location, "Location"),
            "state": (state or "").strip(),
            "purpose": require_non_empty(purpose, "Purpose"),
        }

        movement = self._store.create_movement(fields, today=today or datetime_utils.today())
        logger.info("Recorded movement %s for staff %s (%s..%s)", movement.movement_id, owner, start, end)
        return movement

    def history_for(self, staff_id: str, *, today: Optional[date] = None) -> List[MovementHistoryRow]:
        today = today or datetime_utils.today()
        rows: List[MovementHistoryRow] = []
        for m in sort_most_recent_first(movements_of(self._store.list_movements(), staff_id)):
            try:
                time_status = movement_time_status(m.date_out, m.date_return, today)
            except (TypeError, ValueError):
                logger.warning("Skipping movement %s with unreadable dates", m.movement_id)
                continue
            rows.append(
                MovementHistoryRow(
                    movement=m,
                    date_out_display=format_display(m.date_out),
                    date_return_display=format_display(m.date_return),
                    time_status=time_status,
                )
            )
        return rows

    def list_all(self, *, current_role: Role) -> List[MovementListRow]:
        """Every movement, most recent first, with its owner's name.

        Movements whose staff member no longer exists are flagged ``orphaned``
        so an administrator can find and delete them.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Administrator access required")
        names = {s.staff_id: s.name for s in self._store.list_staff()}
        rows: List[MovementListRow] = []
        for m in sort_most_recent_first(self._store.list_movements()):
            name = names.get(canonical_id(m.staff_id))
            rows.append(MovementListRow(movement=m, staff_name=name or "", orphaned=name is None))
        return rows

    def delete_movement(self, *, current_role: Role, movement_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Administrator access required")
        self._store.delete_movement(require_non_empty(movement_id, "Movement id"))
        logger.info("Deleted movement %s", movement_id)
