"""Business rules a flight search must satisfy, checked in a fixed order.

Every check either returns quietly or raises `SearchRejected` naming the rule
that failed. The validator runs them in sequence and stops at the first
failure.
"""

from __future__ import annotations

from datetime import date

from flight_search.dates import parse_strict_date
from shared.flight_utils import (
    MAX_CHILDREN_PER_ADULT,
    MAX_INFANTS_PER_ADULT,
    MAX_PASSENGERS,
    MIN_PASSENGERS,
    is_allowed,
)


class SearchRejected(ValueError):
    """Raised when a flight search breaks a business rule."""

    def __init__(self, rule: str, message: str) -> None:
        super().__init__(message)
        self.rule = rule


def parse_travel_dates(depart_text: str | None, return_text: str | None) -> tuple[date, date]:
    depart = parse_strict_date(depart_text)
    returning = parse_strict_date(return_text)
    if depart is None or returning is None:
        raise SearchRejected("date_format", "dates must be real calendar dates in dd/mm/yyyy")
    return depart, returning


def check_departure_not_past(depart: date, today: date) -> None:
    if depart < today:
        raise SearchRejected("depart_in_past", f"departure {depart} is before {today}")


def check_return_not_before_departure(depart: date, returning: date) -> None:
    if returning < depart:
        raise SearchRejected("return_before_depart", f"return {returning} is before departure {depart}")


def check_airports(origin: str | None, destination: str | None, allowed: frozenset[str]) -> None:
    if not is_allowed(origin, allowed) or not is_allowed(destination, allowed):
        raise SearchRejected("airport", f"unsupported route {origin!r} -> {destination!r}")
    if origin == destination:
        raise SearchRejected("airport", f"origin and destination are both {origin!r}")


def check_cabin_class(cabin_class: str | None, allowed: frozenset[str]) -> None:
    if not is_allowed(cabin_class, allowed):
        raise SearchRejected("cabin_class", f"unsupported cabin class {cabin_class!r}")


def check_passenger_total(adults: int, children: int, infants: int) -> None:
    if adults < 0 or children < 0 or infants < 0:
        raise SearchRejected("passenger_count", "passenger counts cannot be negative")
    total = adults + children + infants
    if not MIN_PASSENGERS <= total <= MAX_PASSENGERS:
        raise SearchRejected(
            "passenger_count",
            f"total passengers ({total}) must be between {MIN_PASSENGERS} and {MAX_PASSENGERS}",
        )


def check_children_per_adult(adults: int, children: int) -> None:
    if children > MAX_CHILDREN_PER_ADULT * adults:
        raise SearchRejected(
            "children_per_adult",
            f"{children} children exceed {MAX_CHILDREN_PER_ADULT} per adult for {adults} adults",
        )


def check_infants_per_adult(adults: int, infants: int) -> None:
    if infants > MAX_INFANTS_PER_ADULT * adults:
        raise SearchRejected("infants_per_adult", f"{infants} infants but only {adults} adults")


def check_children_seating(children: int, cabin_class: str | None, emergency_row: bool) -> None:
    if children <= 0:
        return
    if emergency_row:
        raise SearchRejected("children_seating", "children cannot sit in an emergency row")
    if cabin_class == "first":
        raise SearchRejected("children_seating", "children cannot travel in first class")


def check_infant_seating(infants: int, cabin_class: str | None, emergency_row: bool) -> None:
    if infants <= 0:
        return
    if emergency_row:
        raise SearchRejected("infant_seating", "infants cannot sit in an emergency row")
    if cabin_class == "business":
        raise SearchRejected("infant_seating", "infants cannot travel in business class")


def check_emergency_row(cabin_class: str | None, emergency_row: bool) -> None:
    if emergency_row and cabin_class != "economy":
        raise SearchRejected("emergency_row", f"emergency rows are economy only, not {cabin_class!r}")


__all__ = [
    "SearchRejected",
    "check_airports",
    "check_cabin_class",
    "check_children_per_adult",
    "check_children_seating",
    "check_departure_not_past",
    "check_emergency_row",
    "check_infant_seating",
    "check_infants_per_adult",
    "check_passenger_total",
    "check_return_not_before_departure",
    "parse_travel_dates",
]
