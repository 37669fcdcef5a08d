"""Booking draft models.

The draft is an immutable snapshot; :class:`pyride.state.booking_store.BookingDraftStore`
replaces it on every mutation. Its :attr:`BookingDraft.phase` is derived
from which parts are present:

====================  ==========  ===============  ========
phase                 pickup      destination      quote
====================  ==========  ===============  ========
``EMPTY``             no          no               n/a
``PICKUP_ONLY``       yes         no               n/a
``DESTINATION_ONLY``  no          yes              n/a
``READY``             yes         yes              no
``ESTIMATED``         yes         yes              yes
====================  ==========  ===============  ========

Only ``ESTIMATED`` exposes a non-zero :attr:`BookingDraft.estimate`.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """WGS84 latitude/longitude pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lat: float = Field(validation_alias=AliasChoices("lat", "latitude"))
    lng: float = Field(validation_alias=AliasChoices("lng", "lon", "longitude"))

    def as_payload(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


class Place(BaseModel):
    """A picked location: what the user saw and where it is."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str
    coordinates: Coordinates


class TripEstimate(BaseModel):
    """Cost/duration/distance triple, always replaced as a whole."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cost: float = 0.0
    duration_minutes: float = 0.0
    distance_km: float = 0.0

    @classmethod
    def zero(cls) -> TripEstimate:
        return cls()


class DraftPhase(StrEnum):
    EMPTY = "empty"
    PICKUP_ONLY = "pickup_only"
    DESTINATION_ONLY = "destination_only"
    READY = "ready"
    ESTIMATED = "estimated"


class BookingDraft(BaseModel):
    """In-progress trip request.

    Parameters
    ----------
    pickup : Place or None
        Pickup label and coordinates, set together.
    destination : Place or None
        Destination label and coordinates, set together.
    selected_driver_id : str or None
        Driver reference; the draft does not own the driver.
    quote : TripEstimate or None
        Last recorded estimate for the current location pair. Read it
        through :attr:`estimate` or :attr:`quoted_estimate`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pickup: Place | None = None
    destination: Place | None = None
    selected_driver_id: str | None = None
    quote: TripEstimate | None = None

    @property
    def phase(self) -> DraftPhase:
        if self.pickup is None and self.destination is None:
            return DraftPhase.EMPTY
        if self.destination is None:
            return DraftPhase.PICKUP_ONLY
        if self.pickup is None:
            return DraftPhase.DESTINATION_ONLY
        if self.quote is None:
            return DraftPhase.READY
        return DraftPhase.ESTIMATED

    @property
    def has_both_locations(self) -> bool:
        return self.phase in (DraftPhase.READY, DraftPhase.ESTIMATED)

    @property
    def quoted_estimate(self) -> TripEstimate | None:
        """The estimate, or ``None`` unless the draft is ``ESTIMATED``."""
        if self.phase is DraftPhase.ESTIMATED:
            return self.quote
        return None

    @property
    def estimate(self) -> TripEstimate:
        """The estimate, reading as all zeros unless the draft is ``ESTIMATED``."""
        quoted = self.quoted_estimate
        return quoted if quoted is not None else TripEstimate.zero()

    @property
    def is_empty(self) -> bool:
        return self == BookingDraft()
