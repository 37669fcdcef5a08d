"""Role profile endpoints.

Endpoints:
  - /api/drivers/me
  - /api/clients/me
  - /api/admin/me
"""

from __future__ import annotations

import logging

from pyride._constants import ADMIN_PROFILE_ENDPOINT, CLIENT_PROFILE_ENDPOINT, DRIVER_PROFILE_ENDPOINT
from pyride._transport import Transport
from pyride.exceptions import RideApiError
from pyride.models.session import Profile, Role, parse_profile

_logger = logging.getLogger(__name__)

_PROFILE_ENDPOINTS: dict[Role, str] = {
    Role.DRIVER: DRIVER_PROFILE_ENDPOINT,
    Role.CLIENT: CLIENT_PROFILE_ENDPOINT,
    Role.ADMIN: ADMIN_PROFILE_ENDPOINT,
}


def profile_endpoint_for_role(role: Role) -> str:
    return _PROFILE_ENDPOINTS[role]


async def fetch_profile(transport: Transport, role: Role, access_token: str | None) -> Profile:
    """Fetch and validate the signed-in user's profile for *role*."""
    endpoint = profile_endpoint_for_role(role)
    body = await transport.get_json(endpoint, access_token=access_token)
    if not isinstance(body, dict):
        raise RideApiError(f"Unexpected profile payload type {type(body).__name__}", endpoint=endpoint)
    profile = parse_profile(role, body)
    _logger.debug("Fetched %s profile %s", role, profile.id)
    return profile
