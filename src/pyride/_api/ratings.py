"""Driver rating endpoint.

Endpoint:
  - /api/ratings/driver/{driver_id} (newest first)
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from pydantic import ValidationError

from pyride._constants import DRIVER_RATINGS_ENDPOINT
from pyride._transport import Transport
from pyride.exceptions import RideApiError
from pyride.models.review import ReviewRecord

_logger = logging.getLogger(__name__)


def _parse_reviews(payload: list[object]) -> list[ReviewRecord]:
    reviews: list[ReviewRecord] = []
    for item in payload:
        try:
            reviews.append(ReviewRecord.model_validate(item))
        except ValidationError as exc:
            _logger.warning("Dropping malformed review record: %s", exc.errors(include_input=False))
    return reviews


async def fetch_driver_reviews(transport: Transport, driver_id: str) -> list[ReviewRecord]:
    """Fetch all reviews left for *driver_id*."""
    endpoint = DRIVER_RATINGS_ENDPOINT.format(driver_id=quote(driver_id, safe=""))
    body = await transport.get_json(endpoint)
    if body is None:
        return []
    if not isinstance(body, list):
        raise RideApiError(f"Expected a list of reviews, got {type(body).__name__}", endpoint=endpoint)
    return _parse_reviews(body)
