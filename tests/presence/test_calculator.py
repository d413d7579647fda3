import logging
from datetime import date, datetime

from src.staff_movement.staff_movement.common import datetime_utils
from src.staff_movement.staff_movement.core.enums import PresenceStatus
from src.staff_movement.staff_movement.presence.calculator import derive_status, derive_status_for
from tests.fakes import make_movement


def test_no_movements_means_in_office():
    assert derive_status([], date(2024, 1, 12)) == PresenceStatus.IN_OFFICE
    assert derive_status(None, date(2024, 1, 12)) == PresenceStatus.IN_OFFICE


def test_covering_movement_means_out_of_office():
    moves = [make_movement("m1", "S1", "2024-01-10", "2024-01-15")]

    assert derive_status(moves, date(2024, 1, 12)) == PresenceStatus.OUT_OF_OFFICE
    assert derive_status(moves, datetime(2024, 1, 15, 18, 0)) == PresenceStatus.OUT_OF_OFFICE


def test_dates_outside_every_range_are_in_office():
    moves = [
        make_movement("m1", "S1", "2024-01-10", "2024-01-15"),
        make_movement("m2", "S1", "2024-01-20", "2024-01-22"),
    ]

    for day in ("2024-01-09", "2024-01-16", "2024-01-19", "2024-01-23"):
        assert derive_status(moves, day) == PresenceStatus.IN_OFFICE


def test_reads_clock_once_when_reference_omitted(monkeypatch):
    calls = []

    def fake_today():
        calls.append(1)
        return date(2024, 1, 12)

    monkeypatch.setattr(datetime_utils, "today", fake_today)
    moves = [make_movement("m1", "S1", "2024-01-10", "2024-01-15")]

    assert derive_status(moves) == PresenceStatus.OUT_OF_OFFICE
    assert len(calls) == 1


def test_derive_status_for_returns_match():
    m = make_movement("m1", "S1", "2024-01-10", "2024-01-15")

    assert derive_status_for([m], "S1", "2024-01-12") == (PresenceStatus.OUT_OF_OFFICE, m)
    assert derive_status_for([m], "S1", "2024-01-16") == (PresenceStatus.IN_OFFICE, None)


def test_unreadable_reference_date_is_logged_not_raised(caplog):
    moves = [make_movement("m1", "S1", "2024-01-10", "2024-01-15")]

    with caplog.at_level(logging.WARNING):
        assert derive_status(moves, "garbage") == PresenceStatus.IN_OFFICE
        assert derive_status_for(moves, "S1", "12/01/2024") == (PresenceStatus.IN_OFFICE, None)

    assert "Unreadable reference date" in caplog.text
