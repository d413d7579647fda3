from __future__ import annotations

from typing import Any, Dict

from ..movements.model import MovementHistoryRow, MovementListRow, MovementRecord
from ..staff.model import StaffMember
from .datetime_utils import format_display


def staff_to_dict(staff: StaffMember, *, include_username: bool = False) -> Dict[str, Any]:
    # Passwords never leave the server.
    out = {
        "id": staff.staff_id,
        "name": staff.name,
        "position": staff.position,
        "role": staff.role.value,
        "current_status": staff.current_status.value,
    }
    if include_username:
        out["username"] = staff.username
    return out


def movement_to_dict(m: MovementRecord) -> Dict[str, Any]:
    return {
        "id": m.movement_id,
        "staff_id": m.staff_id,
        "date_out": m.date_out,
        "date_return": m.date_return,
        "date_out_display": format_display(m.date_out),
        "date_return_display": format_display(m.date_return),
        "time_out": m.time_out,
        "time_return": m.time_return,
        "location": m.location,
        "state": m.state,
        "purpose": m.purpose,
        "status_frequency": m.status_frequency.value if m.status_frequency else None,
    }


def history_row_to_dict(row: MovementHistoryRow) -> Dict[str, Any]:
    out = movement_to_dict(row.movement)
    out["time_status"] = row.time_status.value
    return out


def movement_list_row_to_dict(row: MovementListRow) -> Dict[str, Any]:
    out = movement_to_dict(row.movement)
    out["staff_name"] = row.staff_name
    out["orphaned"] = row.orphaned
    return out
