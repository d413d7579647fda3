from src.staff_movement.staff_movement.movements.search import (
    find_covering,
    movements_of,
    sort_most_recent_first,
)
from tests.fakes import make_movement


def test_covering_movement_found_inside_range():
    m = make_movement("m1", "S1", "2024-01-10", "2024-01-15")

    assert find_covering([m], "S1", "2024-01-12") is m
    assert find_covering([m], "S1", "2024-01-16") is None


def test_other_staff_movements_are_ignored():
    m = make_movement("m1", "S2", "2024-01-10", "2024-01-15")

    assert find_covering([m], "S1", "2024-01-12") is None


def test_numeric_and_string_ids_compare_equal():
    m = make_movement("m1", 7, "2024-01-10", "2024-01-15")

    assert find_covering([m], "7", "2024-01-12") is m
    assert movements_of([m], 7.0) == [m]


def test_first_match_in_input_order_wins():
    early = make_movement("a", "S2", "2024-02-01", "2024-02-10")
    later = make_movement("b", "S2", "2024-02-05", "2024-02-20")

    assert find_covering([early, later], "S2", "2024-02-07") is early


def test_sorting_most_recent_first_prefers_later_departure():
    early = make_movement("a", "S2", "2024-02-01", "2024-02-10")
    later = make_movement("b", "S2", "2024-02-05", "2024-02-20")

    ordered = sort_most_recent_first([early, later])

    assert ordered == [later, early]
    assert find_covering(ordered, "S2", "2024-02-07") is later


def test_sort_puts_unreadable_dates_last():
    bad = make_movement("x", "S1", "", "2024-01-01")
    good = make_movement("y", "S1", "2024-01-01", "2024-01-02")

    assert sort_most_recent_first([bad, good]) == [good, bad]


def test_empty_or_missing_collection():
    assert find_covering([], "S1", "2024-01-12") is None
    assert find_covering(None, "S1", "2024-01-12") is None
