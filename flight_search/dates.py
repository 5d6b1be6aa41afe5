"""Strict travel-date parsing and the clocks that decide what 'today' is."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

DATE_FORMAT = "%d/%m/%Y"
_DATE_SHAPE = re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII)


def parse_strict_date(text: object) -> date | None:
    """Parse a `dd/mm/yyyy` string, returning None for any malformed or impossible date.

    Day and month must be two ASCII digits and the year four. Calendar resolution is
    strict, so `31/11/2026` and `29/02/2026` are rejected while `29/02/2028`
    parses.
    """

    if not isinstance(text, str) or not _DATE_SHAPE.match(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Render a date back into the `dd/mm/yyyy` input format."""

    return value.strftime(DATE_FORMAT)


class Clock(Protocol):
    def today(self) -> date: ...


class ZoneClock:
    """Reads the current date in a fixed IANA time zone."""

    def __init__(self, timezone: str | ZoneInfo) -> None:
        self._zone = timezone if isinstance(timezone, ZoneInfo) else ZoneInfo(timezone)

    def today(self) -> date:
        return datetime.now(self._zone).date()


class FixedClock:
    """Always reports the same day."""

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        return self._day


__all__ = ["DATE_FORMAT", "Clock", "FixedClock", "ZoneClock", "format_date", "parse_strict_date"]
