from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from ..common import datetime_utils
from ..common.datetime_utils import normalize_to_midnight
from ..movements.model import MovementRecord
from ..movements.search import movements_of, sort_most_recent_first
from ..presence.calculator import derive_status
from ..staff.model import StaffMember
from ..store.repository import RecordStore
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class SyncReconciler:
    """Recomputes each member's status for today and corrects stale stored values.

    The returned roster always carries the recomputed status. Corrective
    writes go through the dispatcher and never block or fail the pass.
    """

    def __init__(self, store: RecordStore, dispatcher: Dispatcher):
        self._store = store
        self._dispatcher = dispatcher

    def reconcile(
        self,
        staff_list: Optional[Iterable[StaffMember]],
        movement_list: Optional[Iterable[MovementRecord]],
        *,
        today: Optional[date] = None,
    ) -> List[StaffMember]:
        staff_snapshot = tuple(staff_list or ())
        movement_snapshot = tuple(movement_list or ())
        today = normalize_to_midnight(today) if today is not None else datetime_utils.today()

        result: List[StaffMember] = []
        corrections = 0
        for staff in staff_snapshot:
            try:
                own = sort_most_recent_first(movements_of(movement_snapshot, staff.staff_id))
                computed = derive_status(own, today)
            except Exception:
                logger.exception("Could not derive status for staff %s; keeping stored value", staff.staff_id)
                result.append(staff)
                continue

            if computed == staff.current_status:
                result.append(staff)
                continue

            corrected = staff.with_status(computed)
            self._dispatcher.submit(
                f"update status of staff {staff.staff_id} to {computed.value}",
                self._store.update_staff,
                corrected,
            )
            corrections += 1
            result.append(corrected)

        if corrections:
            logger.info("Reconciled %d of %d staff statuses for %s", corrections, len(staff_snapshot), today)
        return result
