"""pyride - client-side session and booking state for a ride-hailing app."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyride")
except PackageNotFoundError:
    __version__ = "0+local"
from pyride.client import RideClient
from pyride.config import RideConfig
from pyride.exceptions import (
    RideApiError,
    RideAuthenticationError,
    RideConfigError,
    RideError,
    RideTransportError,
)
from pyride.models import (
    AdminProfile,
    BookingDraft,
    ClientProfile,
    Coordinates,
    DraftPhase,
    DriverProfile,
    Identity,
    IdentityCheckResult,
    Place,
    RatingSummary,
    ReviewAuthor,
    ReviewRecord,
    Role,
    RouteMetrics,
    Session,
    TripEstimate,
)
from pyride.ratings import aggregate
from pyride.state import BookingDraftStore, SessionStore, home_route_for_role

__all__ = [
    "__version__",
    "AdminProfile",
    "BookingDraft",
    "BookingDraftStore",
    "ClientProfile",
    "Coordinates",
    "DraftPhase",
    "DriverProfile",
    "Identity",
    "IdentityCheckResult",
    "Place",
    "RatingSummary",
    "ReviewAuthor",
    "ReviewRecord",
    "RideApiError",
    "RideAuthenticationError",
    "RideClient",
    "RideConfig",
    "RideConfigError",
    "RideError",
    "RideTransportError",
    "Role",
    "RouteMetrics",
    "Session",
    "SessionStore",
    "TripEstimate",
    "aggregate",
    "home_route_for_role",
]
