"""Request body models for the booking API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rail_planner.domain.models.traveller import Traveller


class TravellerPayload(BaseModel):
    """A traveller as sent by the front end."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    age: int = Field(default=0, ge=0)
    id_number: str = Field(alias="idNumber", min_length=1)

    def to_domain(self) -> Traveller:
        return Traveller(
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
            id_number=self.id_number,
        )


class SegmentPayload(BaseModel):
    """A connection segment; only the route id is used, other fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    route_id: str = Field(alias="routeId", min_length=1)


class ConnectionPayload(BaseModel):
    """The chosen itinerary as returned by the search endpoint."""

    model_config = ConfigDict(extra="ignore")

    segments: list[SegmentPayload] = Field(min_length=1)


class BookingRequest(BaseModel):
    """Body of ``POST /api/bookings``."""

    connection: ConnectionPayload
    travellers: list[TravellerPayload] = Field(min_length=1)

    @field_validator("travellers", mode="before")
    @classmethod
    def validate_travellers_list(cls, v: Any) -> Any:
        """Reject a single traveller object sent instead of a list."""
        if isinstance(v, dict):
            raise ValueError("travellers must be a list")
        return v

    @property
    def route_ids(self) -> list[str]:
        return [segment.route_id for segment in self.connection.segments]

    def domain_travellers(self) -> list[Traveller]:
        return [traveller.to_domain() for traveller in self.travellers]
