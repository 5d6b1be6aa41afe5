from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import Settings, get_settings


def test_settings_default_to_melbourne(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLIGHT_SEARCH_REFERENCE_TIMEZONE", raising=False)

    assert Settings(_env_file=None).reference_timezone == "Australia/Melbourne"


def test_settings_read_timezone_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLIGHT_SEARCH_REFERENCE_TIMEZONE", "Asia/Qatar")

    assert get_settings().reference_timezone == "Asia/Qatar"


@pytest.mark.parametrize("timezone", ["Mars/Olympus_Mons", "Australia", ""])
def test_settings_reject_unknown_timezone(monkeypatch: pytest.MonkeyPatch, timezone: str) -> None:
    monkeypatch.setenv("FLIGHT_SEARCH_REFERENCE_TIMEZONE", timezone)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
