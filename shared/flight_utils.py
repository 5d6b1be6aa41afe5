"""Shared helpers for flight search request handling."""

from __future__ import annotations

ALLOWED_AIRPORTS: frozenset[str] = frozenset({"syd", "mel", "lax", "cdg", "del", "pvg", "doh"})
ALLOWED_CABIN_CLASSES: frozenset[str] = frozenset(
    {"economy", "premium economy", "business", "first"}
)

MIN_PASSENGERS = 1
MAX_PASSENGERS = 9
MAX_CHILDREN_PER_ADULT = 2
MAX_INFANTS_PER_ADULT = 1


def normalise_text(value: object) -> str | None:
    """Lower-case a loosely typed text value; anything that is not a string becomes None."""

    if not isinstance(value, str):
        return None
    return value.lower()


def is_allowed(value: str | None, allowed: frozenset[str]) -> bool:
    """Return True when the normalised value is a member of the allow-set."""

    if value is None:
        return False
    return value in allowed


__all__ = [
    "ALLOWED_AIRPORTS",
    "ALLOWED_CABIN_CLASSES",
    "MAX_CHILDREN_PER_ADULT",
    "MAX_INFANTS_PER_ADULT",
    "MAX_PASSENGERS",
    "MIN_PASSENGERS",
    "is_allowed",
    "normalise_text",
]
