"""Route calculation endpoint.

Endpoint:
  - /api/routes/calculate
"""

from __future__ import annotations

from pydantic import ValidationError

from pyride._constants import ROUTE_CALCULATE_ENDPOINT
from pyride._transport import Transport
from pyride.exceptions import RideApiError
from pyride.models.booking import Coordinates
from pyride.models.route import RouteMetrics


async def calculate_route(transport: Transport, origin: Coordinates, destination: Coordinates) -> RouteMetrics:
    """Driving distance and duration from *origin* to *destination*."""
    payload = {"origin": origin.as_payload(), "destination": destination.as_payload()}
    body = await transport.post_json(ROUTE_CALCULATE_ENDPOINT, payload)
    try:
        return RouteMetrics.model_validate(body)
    except ValidationError as exc:
        raise RideApiError(
            f"Malformed route response: {exc.error_count()} error(s)",
            endpoint=ROUTE_CALCULATE_ENDPOINT,
        ) from exc
