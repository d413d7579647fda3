from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_SYNC_MAX_PENDING, DEFAULT_SYNC_MAX_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .movements.service import MovementService
from .presence.service import PresenceService
from .staff.service import AuthService, StaffService
from .store.mysql_store import MySQLRecordStore
from .store.repository import RecordStore
from .store.sheet_store import SheetApiRecordStore
from .sync.dispatcher import Dispatcher, UpdateDispatcher
from .sync.reconciler import SyncReconciler
from .sync.scheduler import PresenceBoard


@dataclass(frozen=True)
class Container:
    store: RecordStore
    dispatcher: Dispatcher

    reconciler: SyncReconciler
    presence_board: PresenceBoard

    auth_service: AuthService
    staff_service: StaffService
    movement_service: MovementService
    presence_service: PresenceService


def build_store(settings) -> RecordStore:
    backend = str(getattr(settings, "STORE_BACKEND", "sheet")).lower()
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLRecordStore(conn)
    if backend == "sheet":
        url = getattr(settings, "SHEET_API_URL", "")
        if not url:
            raise ValueError("SHEET_API_URL must be set when STORE_BACKEND=sheet")
        return SheetApiRecordStore(url, timeout=float(getattr(settings, "HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS)))
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(*, settings=None, store: Optional[RecordStore] = None, dispatcher: Optional[Dispatcher] = None) -> Container:
    if store is None:
        store = build_store(settings)
    dispatcher = dispatcher or UpdateDispatcher(
        max_workers=int(getattr(settings, "SYNC_MAX_WORKERS", DEFAULT_SYNC_MAX_WORKERS)),
        max_pending=int(getattr(settings, "SYNC_MAX_PENDING", DEFAULT_SYNC_MAX_PENDING)),
    )

    reconciler = SyncReconciler(store, dispatcher)
    presence_board = PresenceBoard(store=store, reconciler=reconciler)

    return Container(
        store=store,
        dispatcher=dispatcher,
        reconciler=reconciler,
        presence_board=presence_board,
        auth_service=AuthService(store),
        staff_service=StaffService(store),
        movement_service=MovementService(store),
        presence_service=PresenceService(presence_board),
    )
