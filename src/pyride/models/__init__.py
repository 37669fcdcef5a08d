"""Typed models for sessions, booking drafts, reviews and routes."""

from pyride.models.booking import BookingDraft, Coordinates, DraftPhase, Place, TripEstimate
from pyride.models.review import RatingSummary, ReviewAuthor, ReviewRecord
from pyride.models.route import RouteMetrics
from pyride.models.session import (
    AdminProfile,
    AdminRole,
    ClientProfile,
    DriverProfile,
    Identity,
    IdentityCheckResult,
    OnlineStatus,
    Profile,
    Role,
    Session,
    parse_profile,
)

__all__ = [
    "AdminProfile",
    "AdminRole",
    "BookingDraft",
    "ClientProfile",
    "Coordinates",
    "DraftPhase",
    "DriverProfile",
    "Identity",
    "IdentityCheckResult",
    "OnlineStatus",
    "Place",
    "Profile",
    "RatingSummary",
    "ReviewAuthor",
    "ReviewRecord",
    "Role",
    "RouteMetrics",
    "Session",
    "TripEstimate",
    "parse_profile",
]
