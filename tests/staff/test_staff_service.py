import logging

import pytest

from src.staff_movement.staff_movement.core.enums import PresenceStatus, Role
from src.staff_movement.staff_movement.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.staff_movement.staff_movement.staff.service import AuthService, StaffService
from tests.fakes import InMemoryStore, make_movement, make_staff


def test_login_username_case_insensitive_and_trimmed():
    store = InMemoryStore([make_staff("1", "Aminah", username="Aminah", password="Secret1", role=Role.ADMIN)])

    user = AuthService(store).authenticate("  aminah ", " Secret1 ")

    assert user.staff_id == "1"
    assert user.role == Role.ADMIN
    assert user.is_admin


def test_login_password_case_sensitive():
    store = InMemoryStore([make_staff("1", username="aminah", password="Secret1")])

    with pytest.raises(AuthenticationError):
        AuthService(store).authenticate("aminah", "secret1")


def test_login_rejects_blank_credentials():
    store = InMemoryStore([make_staff("1", username="aminah", password="")])

    with pytest.raises(AuthenticationError):
        AuthService(store).authenticate("aminah", "")


def test_create_staff_requires_admin(store):
    with pytest.raises(AuthorizationError):
        StaffService(store).create_staff(
            current_role=Role.STAFF, name="A", position="Clerk", username="a", password="pw"
        )


def test_create_staff_defaults_to_staff_role_in_office(store):
    staff = StaffService(store).create_staff(
        current_role=Role.ADMIN, name=" Badrul ", position="Clerk", username="badrul", password="pw"
    )

    assert staff.name == "Badrul"
    assert staff.role == Role.STAFF
    assert staff.current_status == PresenceStatus.IN_OFFICE
    assert store.staff[staff.staff_id] == staff


def test_create_staff_rejects_duplicate_username():
    store = InMemoryStore([make_staff("1", username="Badrul")])

    with pytest.raises(ValidationError):
        StaffService(store).create_staff(
            current_role=Role.ADMIN, name="B", position="Clerk", username="badrul", password="pw"
        )


def test_create_staff_rejects_unknown_role(store):
    with pytest.raises(ValidationError):
        StaffService(store).create_staff(
            current_role=Role.ADMIN, name="B", position="Clerk", username="b", password="pw", role="owner"
        )


def test_update_merges_fields_and_keeps_status():
    store = InMemoryStore([make_staff("1", "Aminah", status=PresenceStatus.OUT_OF_OFFICE, position="Clerk")])

    updated = StaffService(store).update_staff(current_role=Role.ADMIN, staff_id="1", position="Senior Clerk")

    assert updated.position == "Senior Clerk"
    assert updated.name == "Aminah"
    assert updated.current_status == PresenceStatus.OUT_OF_OFFICE
    assert store.updates == [updated]


def test_update_unknown_staff(store):
    with pytest.raises(NotFoundError):
        StaffService(store).update_staff(current_role=Role.ADMIN, staff_id="404", name="X")


def test_delete_keeps_movements_and_logs_orphans(caplog):
    store = InMemoryStore(
        [make_staff("1"), make_staff("2")],
        [make_movement("m1", "1", "2024-01-10", "2024-01-15")],
    )

    with caplog.at_level(logging.WARNING):
        StaffService(store).delete_staff(current_role=Role.ADMIN, staff_id="1")

    assert "1" not in store.staff
    assert "m1" in store.movements
    assert "leaves 1 movement record" in caplog.text
