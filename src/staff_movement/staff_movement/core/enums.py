from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    STAFF = "staff"


class PresenceStatus(str, Enum):
    """Whether a staff member is in the office on a given date."""

    IN_OFFICE = "IN_OFFICE"
    OUT_OF_OFFICE = "OUT_OF_OFFICE"


class MovementTimeStatus(str, Enum):
    """Where a movement sits relative to a reference date."""

    PAST = "PAST"
    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
