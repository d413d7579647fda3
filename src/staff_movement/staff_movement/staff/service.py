from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import PresenceStatus, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..movements.search import movements_of
from ..store.repository import RecordStore
from .model import StaffMember

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    staff_id: str
    name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def _parse_role(value) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value or Role.STAFF.value).strip().lower())
    except ValueError:
        raise ValidationError("Invalid account role")


def _require_admin(current_role: Role) -> None:
    if current_role != Role.ADMIN:
        raise AuthorizationError("Administrator access required")


class AuthService:
    """Use case: authenticate staff (login)."""

    def __init__(self, store: RecordStore):
        self._store = store

    def authenticate(self, username: str, password: str) -> SessionUser:
        # Fresh roster on every login so edits made elsewhere apply immediately.
        wanted_user = (username or "").strip().lower()
        wanted_pass = (password or "").strip()
        if not wanted_user or not wanted_pass:
            raise AuthenticationError("Invalid username or password")

        for staff in self._store.list_staff():
            if staff.username.strip().lower() != wanted_user:
                continue
            if secrets.compare_digest(staff.password.strip().encode(), wanted_pass.encode()):
                return SessionUser(staff_id=staff.staff_id, name=staff.name, role=staff.role)

        raise AuthenticationError("Invalid username or password (password is case sensitive)")


class StaffService:
    """Use case: manage the staff roster (admin)."""

    def __init__(self, store: RecordStore):
        self._store = store

    def list_staff(self) -> Sequence[StaffMember]:
        return self._store.list_staff()

    def get_staff(self, staff_id: str) -> StaffMember:
        for staff in self._store.list_staff():
            if staff.staff_id == staff_id:
                return staff
        raise NotFoundError("Staff member not found")

    def _ensure_username_free(self, username: str, *, except_id: Optional[str] = None) -> None:
        wanted = username.lower()
        for staff in self._store.list_staff():
            if staff.staff_id != except_id and staff.username.lower() == wanted:
                raise ValidationError("Username already exists")

    def create_staff(
        self,
        *,
        current_role: Role,
        name: str,
        position: str,
        username: str,
        password: str,
        role=Role.STAFF,
    ) -> StaffMember:
        _require_admin(current_role)
        fields = {
            "name": require_non_empty(name, "Name"),
            "position": require_non_empty(position, "Position"),
            "username": require_non_empty(username, "Username"),
            "password": require_non_empty(password, "Password"),
            "role": _parse_role(role).value,
        }
        self._ensure_username_free(fields["username"])

        staff = self._store.create_staff(fields)
        logger.info("Created staff %s (%s)", staff.staff_id, staff.username)
        return staff

    def update_staff(
        self,
        *,
        current_role: Role,
        staff_id: str,
        name: Optional[str] = None,
        position: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        role=None,
        current_status=None,
    ) -> StaffMember:
        """Merge the given fields onto the stored record; omitted fields are kept."""
        _require_admin(current_role)
        original = self.get_staff(staff_id)

        changes = {}
        if name is not None:
            changes["name"] = require_non_empty(name, "Name")
        if position is not None:
            changes["position"] = require_non_empty(position, "Position")
        if username is not None:
            changes["username"] = require_non_empty(username, "Username")
            self._ensure_username_free(changes["username"], except_id=staff_id)
        if password is not None:
            changes["password"] = require_non_empty(password, "Password")
        if role is not None:
            changes["role"] = _parse_role(role)
        if current_status is not None:
            try:
                changes["current_status"] = PresenceStatus(str(current_status).strip().upper())
            except ValueError:
                raise ValidationError("Invalid status")

        updated = replace(original, **changes)
        self._store.update_staff(updated)
        return updated

    def delete_staff(self, *, current_role: Role, staff_id: str) -> None:
        _require_admin(current_role)
        staff = self.get_staff(staff_id)
        self._store.delete_staff(staff.staff_id)

        # Movements are not cascade-deleted; they stay as orphans.
        orphans = movements_of(self._store.list_movements(), staff.staff_id)
        if orphans:
            logger.warning("Deleted staff %s leaves %d movement record(s) behind", staff.staff_id, len(orphans))
