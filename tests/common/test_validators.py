from datetime import date

import pytest

from src.staff_movement.staff_movement.common.validators import require_date_range, require_non_empty
from src.staff_movement.staff_movement.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Kuching ", "Location") == "Kuching"


def test_require_non_empty_rejects_blank():
    with pytest.raises(ValidationError):
        require_non_empty("   ", "Location")


def test_date_range_accepts_single_day():
    assert require_date_range("2024-01-10", "2024-01-10") == (date(2024, 1, 10), date(2024, 1, 10))


def test_date_range_rejects_return_before_departure():
    with pytest.raises(ValidationError):
        require_date_range("2024-01-15", "2024-01-10")


def test_date_range_rejects_malformed_dates():
    with pytest.raises(ValidationError):
        require_date_range("10/01/2024", "2024-01-15")
