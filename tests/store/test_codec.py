from datetime import date

from src.staff_movement.staff_movement.common.datetime_utils import format_display
from src.staff_movement.staff_movement.core.enums import PresenceStatus, Role
from src.staff_movement.staff_movement.presence.calculator import derive_status
from src.staff_movement.staff_movement.store.codec import (
    movement_from_record,
    movement_to_record,
    staff_from_record,
    staff_to_record,
)


def test_staff_record_with_numbers_and_nulls_is_coerced():
    staff = staff_from_record(
        {"id": 1700000000000, "name": None, "username": " Ali ", "password": 12345, "role": "ADMIN", "currentStatus": None}
    )

    assert staff.staff_id == "1700000000000"
    assert staff.name == ""
    assert staff.position == ""
    assert staff.username == "Ali"
    assert staff.password == "12345"
    assert staff.role == Role.ADMIN
    assert staff.current_status == PresenceStatus.IN_OFFICE


def test_unknown_role_and_status_fall_back_to_defaults():
    staff = staff_from_record({"id": "9", "role": "superuser", "currentStatus": "ON_LEAVE"})

    assert staff.role == Role.STAFF
    assert staff.current_status == PresenceStatus.IN_OFFICE


def test_movement_record_dates_are_normalized_to_strings():
    m = movement_from_record(
        {"id": "m1", "staffId": 42.0, "dateOut": date(2024, 1, 10), "dateReturn": "2024-01-15", "timeOut": ""}
    )

    assert m.staff_id == "42"
    assert m.date_out == "2024-01-10"
    assert m.date_return == "2024-01-15"
    assert m.time_out is None
    assert m.location == ""
    assert m.status_frequency is None


def test_wire_keys_match_store_format():
    staff = staff_from_record({"id": "1", "name": "Aminah", "role": "staff"})
    m = movement_from_record({"id": "m1", "staffId": "1", "dateOut": "2024-01-10", "dateReturn": "2024-01-11"})

    assert set(staff_to_record(staff)) == {"id", "name", "position", "username", "password", "role", "currentStatus"}
    assert movement_to_record(m)["staffId"] == "1"
    assert movement_to_record(m)["statusFrequency"] == ""


def test_sheet_timestamps_cross_as_local_iso_dates(utc_plus_8):
    m = movement_from_record(
        {
            "id": "m1",
            "staffId": "1",
            "dateOut": "2024-01-09T16:00:00.000Z",
            "dateReturn": "2024-01-11T16:00:00.000Z",
        }
    )

    assert m.date_out == "2024-01-10"
    assert m.date_return == "2024-01-12"
    assert format_display(m.date_out) == "10/01/2024"
    assert derive_status([m], date(2024, 1, 10)) == PresenceStatus.OUT_OF_OFFICE
    assert derive_status([m], date(2024, 1, 9)) == PresenceStatus.IN_OFFICE


def test_unparseable_long_date_text_is_kept():
    m = movement_from_record({"id": "m1", "staffId": "1", "dateOut": "next tuesday-ish", "dateReturn": ""})

    assert m.date_out == "next tuesday-ish"
