from __future__ import annotations

from shared.flight_utils import ALLOWED_AIRPORTS, ALLOWED_CABIN_CLASSES, is_allowed, normalise_text


def test_normalise_text_lower_cases_strings() -> None:
    assert normalise_text("MeL") == "mel"
    assert normalise_text("Premium Economy") == "premium economy"


def test_normalise_text_turns_non_strings_into_none() -> None:
    assert normalise_text(None) is None
    assert normalise_text(42) is None


def test_is_allowed_rejects_none_and_unknown_codes() -> None:
    assert is_allowed("syd", ALLOWED_AIRPORTS)
    assert not is_allowed("zzz", ALLOWED_AIRPORTS)
    assert not is_allowed(None, ALLOWED_CABIN_CLASSES)
