"""Client-side state.

Two independent observable stores (session and booking draft) plus the
role-to-route rule. Stores are plain objects: the application context
creates one of each and passes them to whatever needs them.
"""

from pyride.state.booking_store import BookingDraftStore
from pyride.state.observable import Notifier, ObservableStore
from pyride.state.routing import home_route_for_role
from pyride.state.session_store import SessionStore

__all__ = [
    "BookingDraftStore",
    "Notifier",
    "ObservableStore",
    "SessionStore",
    "home_route_for_role",
]
