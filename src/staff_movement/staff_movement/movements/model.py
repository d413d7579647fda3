from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import MovementTimeStatus, PresenceStatus


@dataclass(frozen=True)
class MovementRecord:
    """Domain entity: a declared absence interval for one staff member.

    Dates are ISO ``YYYY-MM-DD`` strings with inclusive bounds. Times of day
    are annotations only and never take part in status computation.
    """

    movement_id: str
    staff_id: str
    date_out: str
    date_return: str
    location: str = ""
    state: str = ""
    purpose: str = ""
    time_out: Optional[str] = None
    time_return: Optional[str] = None
    status_frequency: Optional[PresenceStatus] = None


@dataclass(frozen=True)
class MovementHistoryRow:
    """Read-model for a staff member's movement history."""

    movement: MovementRecord
    date_out_display: str
    date_return_display: str
    time_status: MovementTimeStatus


@dataclass(frozen=True)
class MovementListRow:
    """Read-model for the admin list of every movement."""

    movement: MovementRecord
    staff_name: str
    orphaned: bool
