"""Application context: owns the stores and talks to the backend.

The stores never see a failed request. Every boundary failure is logged
here and turned into "no data" (an absent profile, an empty review list,
an untouched estimate).
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from pyride._api.profiles import fetch_profile
from pyride._api.ratings import fetch_driver_reviews
from pyride._api.routes import calculate_route
from pyride._transport import JsonTransport, Transport
from pyride.config import RideConfig
from pyride.exceptions import RideError
from pyride.models.booking import TripEstimate
from pyride.models.review import RatingSummary, ReviewRecord
from pyride.models.session import IdentityCheckResult, Profile, Role
from pyride.pricing import estimate_trip
from pyride.ratings import aggregate
from pyride.state.booking_store import BookingDraftStore
from pyride.state.routing import home_route_for_role
from pyride.state.session_store import SessionStore

_logger = logging.getLogger(__name__)


class RideClient:
    """Async client wiring the session and booking stores to the API.

    Usage::

        async with RideClient(config) as client:
            await client.apply_identity(result)
            route = client.home_route()
    """

    def __init__(
        self,
        config: RideConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        session_store: SessionStore | None = None,
        booking_store: BookingDraftStore | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        self.session_store = session_store if session_store is not None else SessionStore()
        self.booking_store = booking_store if booking_store is not None else BookingDraftStore()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RideClient:
        if not self._external_transport:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = JsonTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise RideError("Client not initialized. Use 'async with RideClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    async def apply_identity(self, result: IdentityCheckResult | None) -> None:
        """Populate the session from an identity check.

        ``None`` means nobody is signed in. ``loading`` is cleared whether
        or not the profile could be fetched.
        """
        store = self.session_store
        if result is not None and result.profile is None and result.role is not None:
            # Checked before the first store mutation.
            self._require_transport()
        try:
            if result is None:
                store.logout()
                return

            previous = store.session.identity
            if previous is not None and previous != result.identity:
                # A different user: drop the previous role and profile in one step.
                store.logout()
            store.set_identity(result.identity)
            store.set_role(result.role)
            profile = result.profile
            if profile is None and result.role is not None:
                profile = await self._load_profile(result.role, result.identity.access_token)
                if store.session.identity != result.identity:
                    _logger.debug("Discarding profile fetched for a previous identity")
                    return
            store.set_profile(profile)
        finally:
            store.set_loading(False)

    async def refresh_profile(self) -> Profile | None:
        """Re-fetch the profile of the signed-in user (e.g. after an edit)."""
        session = self.session_store.session
        if session.identity is None or session.role is None:
            return None
        profile = await self._load_profile(session.role, session.identity.access_token)
        # The user may have signed out while the request was in flight.
        if self.session_store.session.identity != session.identity:
            _logger.debug("Discarding profile fetched for a previous identity")
            return None
        if profile is not None:
            self.session_store.set_profile(profile)
        return profile

    async def _load_profile(self, role: Role, access_token: str | None) -> Profile | None:
        transport = self._require_transport()
        try:
            return await fetch_profile(transport, role, access_token)
        except (RideError, ValidationError) as exc:
            _logger.warning("Failed to fetch %s profile: %s", role, exc)
            return None

    def logout(self) -> None:
        """Sign-out: drop the session and abandon any booking in progress."""
        self.session_store.logout()
        self.booking_store.clear()

    def home_route(self) -> str:
        return home_route_for_role(self.session_store.session.role)

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------

    async def fetch_reviews(self, driver_id: str) -> list[ReviewRecord]:
        """Reviews for *driver_id*, or an empty list if they cannot be loaded."""
        transport = self._require_transport()
        try:
            return await fetch_driver_reviews(transport, driver_id)
        except RideError as exc:
            _logger.warning("Failed to fetch reviews for driver %s: %s", driver_id, exc)
            return []

    async def load_review_summary(self, driver_id: str, average_rating: float) -> RatingSummary:
        reviews = await self.fetch_reviews(driver_id)
        return aggregate(reviews, average=average_rating)

    # ------------------------------------------------------------------
    # Booking estimate
    # ------------------------------------------------------------------

    async def refresh_estimate(self, hourly_rate: float) -> TripEstimate | None:
        """Compute and record the estimate for the current location pair.

        Returns ``None`` (leaving the draft untouched) when a location is
        missing, the rate is negative, the route cannot be calculated, or the
        locations changed while the request was in flight.
        """
        if hourly_rate < 0:
            _logger.warning("Ignoring estimate request with negative hourly rate %s", hourly_rate)
            return None
        draft = self.booking_store.draft
        if draft.pickup is None or draft.destination is None:
            _logger.debug("Estimate requested before both locations were set")
            return None

        transport = self._require_transport()
        try:
            metrics = await calculate_route(transport, draft.pickup.coordinates, draft.destination.coordinates)
        except RideError as exc:
            _logger.warning("Route calculation failed: %s", exc)
            return None

        current = self.booking_store.draft
        if current.pickup != draft.pickup or current.destination != draft.destination:
            _logger.debug("Discarding estimate for a superseded location pair")
            return None

        estimate = estimate_trip(metrics, hourly_rate)
        self.booking_store.set_estimate(estimate.cost, estimate.duration_minutes, estimate.distance_km)
        return estimate
