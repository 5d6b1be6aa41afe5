"""Input and result contracts for flight search validation."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from shared.flight_utils import normalise_text


class FlightSearchRequest(BaseModel):
    """Raw, untrusted flight search inputs.

    Text fields are lower-cased on the way in. Missing or non-string values
    become None, which no allow-set contains, so they fail the rule chain
    instead of the parse.
    """

    origin: str | None = None
    destination: str | None = None
    depart_date: str | None = Field(default=None, description="dd/mm/yyyy")
    return_date: str | None = Field(default=None, description="dd/mm/yyyy")
    cabin_class: str | None = None
    adults: StrictInt = 0
    children: StrictInt = 0
    infants: StrictInt = 0
    emergency_row: StrictBool = False

    @field_validator("origin", "destination", "cabin_class", mode="before")
    @classmethod
    def lower_case_text(cls, value: object) -> str | None:
        return normalise_text(value)

    @field_validator("depart_date", "return_date", mode="before")
    @classmethod
    def keep_text_only(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None


class ValidatedSearch(BaseModel):
    """A flight search that passed every rule. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    depart_date: date
    return_date: date
    cabin_class: str
    adults: int
    children: int
    infants: int
    emergency_row: bool

    @property
    def total_passengers(self) -> int:
        return self.adults + self.children + self.infants


__all__ = ["FlightSearchRequest", "ValidatedSearch"]
