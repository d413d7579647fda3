from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..common import datetime_utils
from ..core.constants import DEFAULT_REFRESH_SECONDS
from ..movements.model import MovementRecord
from ..staff.model import StaffMember
from ..store.repository import RecordStore
from .reconciler import SyncReconciler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    staff: Tuple[StaffMember, ...] = ()
    movements: Tuple[MovementRecord, ...] = ()
    as_of: Optional[date] = None
    refreshed_at: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return self.refreshed_at is None


@dataclass
class PresenceBoard:
    """Latest reconciled roster and movements, as served to the dashboard."""

    store: RecordStore
    reconciler: SyncReconciler
    _snapshot: BoardSnapshot = field(default_factory=BoardSnapshot)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def snapshot(self) -> BoardSnapshot:
        with self._lock:
            return self._snapshot

    def refresh(self, *, today: Optional[date] = None) -> BoardSnapshot:
        # Outermost layer: the only place that reads the clock for a pass.
        today = today or datetime_utils.today()
        staff = self.store.list_staff()
        movements = self.store.list_movements()
        synced = self.reconciler.reconcile(staff, movements, today=today)

        snap = BoardSnapshot(
            staff=tuple(synced),
            movements=tuple(movements),
            as_of=today,
            refreshed_at=datetime.now(),
        )
        with self._lock:
            self._snapshot = snap
        return snap


class PresenceRefresher:
    """Runs ``PresenceBoard.refresh`` periodically in the background."""

    JOB_ID = "presence_refresh"

    def __init__(self, board: PresenceBoard, *, interval_seconds: int = DEFAULT_REFRESH_SECONDS):
        self._board = board
        self._interval = int(interval_seconds)
        self.scheduler = BackgroundScheduler()

    def _refresh_job(self) -> None:
        try:
            snap = self._board.refresh()
            logger.debug("Presence board refreshed: %d staff, %d movements", len(snap.staff), len(snap.movements))
        except Exception:
            logger.exception("Failed to refresh presence board")

    def start(self) -> None:
        # Overlapping passes are allowed; each works from its own snapshot.
        self.scheduler.add_job(
            func=self._refresh_job,
            trigger=IntervalTrigger(seconds=self._interval),
            id=self.JOB_ID,
            name="Refresh presence board",
            replace_existing=True,
            coalesce=True,
            max_instances=3,
            next_run_time=datetime.now(),
        )
        self.scheduler.start()
        logger.info("Presence refresh scheduled every %ds", self._interval)

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
