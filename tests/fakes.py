from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from src.staff_movement.staff_movement.core.enums import PresenceStatus, Role
from src.staff_movement.staff_movement.core.exceptions import StoreError
from src.staff_movement.staff_movement.movements.model import MovementRecord
from src.staff_movement.staff_movement.staff.model import StaffMember
from src.staff_movement.staff_movement.store.codec import build_movement, build_staff
from src.staff_movement.staff_movement.store.repository import status_frequency


class InMemoryStore:
    """RecordStore fake keeping rows in insertion order and recording writes."""

    def __init__(self, staff: Optional[List[StaffMember]] = None, movements: Optional[List[MovementRecord]] = None):
        self.staff: Dict[str, StaffMember] = {s.staff_id: s for s in staff or []}
        self.movements: Dict[str, MovementRecord] = {m.movement_id: m for m in movements or []}
        self.updates: List[StaffMember] = []
        self.created_movements: List[MovementRecord] = []
        self.fail_updates = False
        self._next = 0

    def _id(self, prefix: str) -> str:
        self._next += 1
        return f"{prefix}{self._next}"

    def list_staff(self):
        return list(self.staff.values())

    def list_movements(self):
        return list(self.movements.values())

    def create_staff(self, fields: Mapping[str, Any]) -> StaffMember:
        staff = build_staff(fields, staff_id=self._id("s"))
        self.staff[staff.staff_id] = staff
        return staff

    def update_staff(self, staff: StaffMember) -> None:
        if self.fail_updates:
            raise StoreError("sheet unreachable")
        self.updates.append(staff)
        self.staff[staff.staff_id] = staff

    def delete_staff(self, staff_id: str) -> None:
        self.staff.pop(staff_id, None)

    def create_movement(self, fields: Mapping[str, Any], *, today: Optional[date] = None) -> MovementRecord:
        movement = build_movement(
            fields,
            movement_id=self._id("m"),
            status_frequency=status_frequency(str(fields.get("date_return") or ""), today or date.today()),
        )
        self.movements[movement.movement_id] = movement
        self.created_movements.append(movement)
        return movement

    def delete_movement(self, movement_id: str) -> None:
        self.movements.pop(movement_id, None)


def make_staff(staff_id: str, name: str = "", *, status=PresenceStatus.IN_OFFICE, role=Role.STAFF, **kw) -> StaffMember:
    return StaffMember(
        staff_id=staff_id,
        name=name or f"Staff {staff_id}",
        position=kw.get("position", "Officer"),
        username=kw.get("username", f"user{staff_id}"),
        password=kw.get("password", "Secret1"),
        role=role,
        current_status=status,
    )


def make_movement(movement_id: str, staff_id, date_out: str, date_return: str, **kw) -> MovementRecord:
    return MovementRecord(
        movement_id=movement_id,
        staff_id=staff_id,
        date_out=date_out,
        date_return=date_return,
        location=kw.get("location", "Kuching"),
        state=kw.get("state", "Sarawak"),
        purpose=kw.get("purpose", "Meeting"),
    )


