from __future__ import annotations

import uuid

from ..core.constants import MOVEMENT_ID_PREFIX


def new_staff_id() -> str:
    return uuid.uuid4().hex


def new_movement_id() -> str:
    # Prefix keeps movement ids distinguishable from staff ids in a shared sheet.
    return f"{MOVEMENT_ID_PREFIX}{uuid.uuid4().hex}"


def canonical_id(value) -> str:
    """Coerce an identifier from any source (int, float, str, None) to its string form."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()
