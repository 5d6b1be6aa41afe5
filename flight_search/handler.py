"""AWS Lambda-style handler for flight search validation."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from flight_search.models import FlightSearchRequest
from flight_search.validator import FlightSearchValidator

logger = logging.getLogger(__name__)

_validator = FlightSearchValidator()


def lambda_handler(event: dict[str, Any], _context: Any | None = None) -> dict[str, Any]:
    """Entry point compatible with AWS Lambda.

    Malformed payloads are reported as rejected rather than raised.
    """

    try:
        request = FlightSearchRequest.model_validate(event)
    except ValidationError as exc:
        logger.error("Invalid Flight Search payload: %s", exc)
        return {"status": "rejected"}

    search = _validator.validate_request(request)
    if search is None:
        return {"status": "rejected"}
    return {"status": "accepted", "search": search.model_dump(mode="json")}


__all__ = ["lambda_handler"]
