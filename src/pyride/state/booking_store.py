"""Booking draft store."""

from __future__ import annotations

import logging

from pyride.models.booking import BookingDraft, Coordinates, Place, TripEstimate
from pyride.state.observable import Notifier, ObservableStore

_logger = logging.getLogger(__name__)


def _as_coordinates(coordinates: Coordinates | tuple[float, float]) -> Coordinates:
    if isinstance(coordinates, Coordinates):
        return coordinates
    lat, lng = coordinates
    return Coordinates(lat=lat, lng=lng)


class BookingDraftStore(ObservableStore[BookingDraft]):
    """Value holder for the trip request being composed.

    Setting either location replaces that location as a whole and drops
    any recorded estimate. An estimate is only kept while both locations
    are set; one set earlier is dropped. The store performs no geocoding,
    routing or pricing.
    """

    def __init__(self, *, notifier: Notifier[BookingDraft] | None = None) -> None:
        super().__init__(BookingDraft(), notifier=notifier)

    @property
    def draft(self) -> BookingDraft:
        return self.snapshot

    def set_pickup(self, label: str, coordinates: Coordinates | tuple[float, float]) -> None:
        place = Place(label=label, coordinates=_as_coordinates(coordinates))
        self._commit(lambda d: d.model_copy(update={"pickup": place, "quote": None}))

    def set_destination(self, label: str, coordinates: Coordinates | tuple[float, float]) -> None:
        place = Place(label=label, coordinates=_as_coordinates(coordinates))
        self._commit(lambda d: d.model_copy(update={"destination": place, "quote": None}))

    def set_selected_driver(self, driver_id: str | None) -> None:
        self._commit(lambda d: d.model_copy(update={"selected_driver_id": driver_id}))

    def set_estimate(self, cost: float, duration_minutes: float, distance_km: float) -> None:
        quote = TripEstimate(cost=cost, duration_minutes=duration_minutes, distance_km=distance_km)

        def _apply(d: BookingDraft) -> BookingDraft:
            if not d.has_both_locations:
                _logger.debug("Dropping estimate set before both locations")
                return d.model_copy(update={"quote": None})
            return d.model_copy(update={"quote": quote})

        self._commit(_apply)

    def clear(self) -> None:
        self._commit(lambda _d: BookingDraft())
