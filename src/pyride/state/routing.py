"""Role-based home routes used after sign-in."""

from __future__ import annotations

from typing import Any

from pyride._constants import ADMIN_HOME_ROUTE, CLIENT_HOME_ROUTE, DEFAULT_ROUTE, DRIVER_HOME_ROUTE
from pyride.models.session import Role

_HOME_ROUTES: dict[Role, str] = {
    Role.DRIVER: DRIVER_HOME_ROUTE,
    Role.CLIENT: CLIENT_HOME_ROUTE,
    Role.ADMIN: ADMIN_HOME_ROUTE,
}


def home_route_for_role(role: Any) -> str:
    """Map a role to its dashboard; anything unrecognized goes to ``/``."""
    parsed = Role.parse(role)
    if parsed is None:
        return DEFAULT_ROUTE
    return _HOME_ROUTES[parsed]
