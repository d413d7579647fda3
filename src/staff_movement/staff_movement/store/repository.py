from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..common.datetime_utils import normalize_to_midnight
from ..core.enums import PresenceStatus
from ..movements.model import MovementRecord
from ..staff.model import StaffMember


class RecordStore(Protocol):
    """Interface of the durable record store holding staff and movements.

    Note (DIP): services depend on this interface, never on a concrete backend.
    Reads fail soft (empty sequence on transport error); writes raise
    ``StoreError``.
    """

    def list_staff(self) -> Sequence[StaffMember]:
        raise NotImplementedError

    def list_movements(self) -> Sequence[MovementRecord]:
        raise NotImplementedError

    def create_staff(self, fields: Mapping[str, Any]) -> StaffMember:
        raise NotImplementedError

    def update_staff(self, staff: StaffMember) -> None:
        """Idempotent upsert keyed by ``staff.staff_id``."""

        raise NotImplementedError

    def delete_staff(self, staff_id: str) -> None:
        raise NotImplementedError

    def create_movement(self, fields: Mapping[str, Any], *, today: Optional[date] = None) -> MovementRecord:
        raise NotImplementedError

    def delete_movement(self, movement_id: str) -> None:
        raise NotImplementedError


def status_frequency(date_return: str, today: date) -> PresenceStatus:
    """Tag stored with a new movement: still out unless it already ended."""
    try:
        ends = normalize_to_midnight(date_return)
    except (TypeError, ValueError):
        return PresenceStatus.IN_OFFICE
    return PresenceStatus.OUT_OF_OFFICE if ends >= today else PresenceStatus.IN_OFFICE
