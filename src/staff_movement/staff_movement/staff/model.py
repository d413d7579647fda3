from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.enums import PresenceStatus, Role


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a staff member on the roster.

    Note: ``current_status`` is a cached value. It is always re-derivable from
    the member's movements and is corrected by the reconciler.
    """

    staff_id: str
    name: str
    position: str
    username: str
    password: str
    role: Role = Role.STAFF
    current_status: PresenceStatus = PresenceStatus.IN_OFFICE

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def with_status(self, status: PresenceStatus) -> "StaffMember":
        return replace(self, current_status=status)
