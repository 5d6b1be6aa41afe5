from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest

from config.settings import get_settings
from flight_search.dates import FixedClock
from flight_search.validator import FlightSearchValidator

TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the reference zone and drop any cached settings between tests."""

    monkeypatch.setenv("FLIGHT_SEARCH_REFERENCE_TIMEZONE", "Australia/Melbourne")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def validator(clock: FixedClock) -> FlightSearchValidator:
    return FlightSearchValidator(clock=clock)
