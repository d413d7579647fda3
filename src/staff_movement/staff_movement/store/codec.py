"""Single coercion pass between loose store records and domain entities.

Record stores hand back loosely typed dicts: numeric ids, nulls, missing keys,
spreadsheet timestamps. Everything is normalized here so the rest of the
package only sees canonical ``StaffMember`` / ``MovementRecord`` values.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.ids import canonical_id
from ..core.enums import PresenceStatus, Role
from ..movements.model import MovementRecord
from ..staff.model import StaffMember


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    text = _text(value).strip()
    return text or None


def _date_text(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = _text(value).strip()
    if len(text) > 10:
        # Spreadsheet timestamp: keep only the local calendar day.
        try:
            return parse_iso_date(text).isoformat()
        except ValueError:
            return text
    return text


def coerce_role(value: Any) -> Role:
    try:
        return Role(_text(value).strip().lower())
    except ValueError:
        return Role.STAFF


def coerce_status(value: Any, default: Optional[PresenceStatus] = PresenceStatus.IN_OFFICE) -> Optional[PresenceStatus]:
    try:
        return PresenceStatus(_text(value).strip().upper())
    except ValueError:
        return default


def staff_from_record(raw: Mapping[str, Any]) -> StaffMember:
    return StaffMember(
        staff_id=canonical_id(raw.get("id")),
        name=_text(raw.get("name")),
        position=_text(raw.get("position")),
        username=_text(raw.get("username")).strip(),
        password=_text(raw.get("password")).strip(),
        role=coerce_role(raw.get("role")),
        current_status=coerce_status(raw.get("currentStatus")),
    )


def staff_to_record(staff: StaffMember) -> Dict[str, Any]:
    return {
        "id": staff.staff_id,
        "name": staff.name,
        "position": staff.position,
        "username": staff.username,
        "password": staff.password,
        "role": staff.role.value,
        "currentStatus": staff.current_status.value,
    }


def movement_from_record(raw: Mapping[str, Any]) -> MovementRecord:
    return MovementRecord(
        movement_id=canonical_id(raw.get("id")),
        staff_id=canonical_id(raw.get("staffId")),
        date_out=_date_text(raw.get("dateOut")),
        date_return=_date_text(raw.get("dateReturn")),
        location=_text(raw.get("location")),
        state=_text(raw.get("state")),
        purpose=_text(raw.get("purpose")),
        time_out=_optional_text(raw.get("timeOut")),
        time_return=_optional_text(raw.get("timeReturn")),
        status_frequency=coerce_status(raw.get("statusFrequency"), default=None),
    )


def movement_to_record(movement: MovementRecord) -> Dict[str, Any]:
    return {
        "id": movement.movement_id,
        "staffId": movement.staff_id,
        "dateOut": movement.date_out,
        "dateReturn": movement.date_return,
        "timeOut": movement.time_out or "",
        "timeReturn": movement.time_return or "",
        "location": movement.location,
        "state": movement.state,
        "purpose": movement.purpose,
        "statusFrequency": movement.status_frequency.value if movement.status_frequency else "",
    }


def build_staff(fields: Mapping[str, Any], *, staff_id: str) -> StaffMember:
    """New roster entry from service-level fields; always starts in office."""
    return StaffMember(
        staff_id=staff_id,
        name=_text(fields.get("name")).strip(),
        position=_text(fields.get("position")).strip(),
        username=_text(fields.get("username")).strip(),
        password=_text(fields.get("password")).strip(),
        role=coerce_role(fields.get("role")),
        current_status=PresenceStatus.IN_OFFICE,
    )


def build_movement(fields: Mapping[str, Any], *, movement_id: str, status_frequency: PresenceStatus) -> MovementRecord:
    return MovementRecord(
        movement_id=movement_id,
        staff_id=canonical_id(fields.get("staff_id")),
        date_out=_date_text(fields.get("date_out")),
        date_return=_date_text(fields.get("date_return")),
        location=_text(fields.get("location")).strip(),
        state=_text(fields.get("state")).strip(),
        purpose=_text(fields.get("purpose")).strip(),
        time_out=_optional_text(fields.get("time_out")),
        time_return=_optional_text(fields.get("time_return")),
        status_frequency=status_frequency,
    )
