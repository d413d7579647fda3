from __future__ import annotations

import os
import time

import pytest

from tests.fakes import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def utc_plus_8():
    """Run the test with the process local timezone fixed at UTC+8."""
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "MYT-8"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
