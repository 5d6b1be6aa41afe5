"""Flight search validator: runs the rule chain and commits on success."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from config.settings import get_settings
from flight_search import rules
from flight_search.dates import Clock, ZoneClock, format_date
from flight_search.models import FlightSearchRequest, ValidatedSearch
from shared.flight_utils import ALLOWED_AIRPORTS, ALLOWED_CABIN_CLASSES

logger = logging.getLogger(__name__)


class FlightSearchValidator:
    """Checks flight searches and holds the last one that passed.

    A rejected call never touches `search`; an accepted call replaces it with a
    freshly built record.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        allowed_airports: frozenset[str] = ALLOWED_AIRPORTS,
        allowed_cabin_classes: frozenset[str] = ALLOWED_CABIN_CLASSES,
    ) -> None:
        self._clock = clock or ZoneClock(get_settings().reference_timezone)
        self._allowed_airports = frozenset(allowed_airports)
        self._allowed_cabin_classes = frozenset(allowed_cabin_classes)
        self._search: ValidatedSearch | None = None

    @property
    def search(self) -> ValidatedSearch | None:
        """Last accepted search, or None before the first success."""

        return self._search

    def validate(
        self,
        origin: Any,
        destination: Any,
        depart_date: Any,
        return_date: Any,
        cabin_class: Any,
        adults: Any,
        children: Any,
        infants: Any,
        emergency_row: Any,
    ) -> ValidatedSearch | None:
        """Validate the nine raw inputs; return the committed record or None."""

        payload = {
            "origin": origin,
            "destination": destination,
            "depart_date": depart_date,
            "return_date": return_date,
            "cabin_class": cabin_class,
            "adults": adults,
            "children": children,
            "infants": infants,
            "emergency_row": emergency_row,
        }
        try:
            request = FlightSearchRequest.model_validate(payload)
        except ValidationError as exc:
            logger.info("Flight search rejected (malformed input): %s", exc)
            return None
        return self.validate_request(request)

    def validate_request(self, request: FlightSearchRequest) -> ValidatedSearch | None:
        try:
            candidate = self._check(request)
        except rules.SearchRejected as exc:
            logger.info("Flight search rejected (%s): %s", exc.rule, exc)
            return None
        except Exception:
            logger.exception("Unexpected failure while validating flight search")
            return None

        self._search = candidate
        logger.debug(
            "Flight search accepted: %s -> %s on %s",
            candidate.origin,
            candidate.destination,
            format_date(candidate.depart_date),
        )
        return candidate

    def _check(self, request: FlightSearchRequest) -> ValidatedSearch:
        depart, returning = rules.parse_travel_dates(request.depart_date, request.return_date)
        rules.check_departure_not_past(depart, self._clock.today())
        rules.check_return_not_before_departure(depart, returning)
        rules.check_airports(request.origin, request.destination, self._allowed_airports)
        rules.check_cabin_class(request.cabin_class, self._allowed_cabin_classes)
        rules.check_passenger_total(request.adults, request.children, request.infants)
        rules.check_children_per_adult(request.adults, request.children)
        rules.check_infants_per_adult(request.adults, request.infants)
        rules.check_children_seating(request.children, request.cabin_class, request.emergency_row)
        rules.check_infant_seating(request.infants, request.cabin_class, request.emergency_row)
        rules.check_emergency_row(request.cabin_class, request.emergency_row)

        return ValidatedSearch(
            origin=request.origin,
            destination=request.destination,
            depart_date=depart,
            return_date=returning,
            cabin_class=request.cabin_class,
            adults=request.adults,
            children=request.children,
            infants=request.infants,
            emergency_row=request.emergency_row,
        )


__all__ = ["FlightSearchValidator"]
