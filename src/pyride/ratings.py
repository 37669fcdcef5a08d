"""Star distribution for a driver's reviews.

:func:`aggregate` is pure: the same reviews (in any order) always give the
same :class:`~pyride.models.review.RatingSummary`.

Ratings outside 1..5 are skipped. They are not clamped into the nearest
bucket, since that would inflate the one- and five-star counts with data
that was never a valid rating. Skipped reviews are reported in
``RatingSummary.skipped`` and do not count towards ``total``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyride._constants import MAX_STARS, MIN_STARS
from pyride._normalize import exact_int
from pyride.models.review import RatingSummary, ReviewRecord

_logger = logging.getLogger(__name__)


def _star_bucket(rating: object) -> int | None:
    stars = exact_int(rating)
    if stars is None or not MIN_STARS <= stars <= MAX_STARS:
        return None
    return stars - MIN_STARS


def aggregate(reviews: Iterable[ReviewRecord], average: float = 0.0) -> RatingSummary:
    """Count *reviews* per star.

    Parameters
    ----------
    reviews : iterable of ReviewRecord
        Reviews to count; may be a single page of a longer list.
    average : float
        The driver's overall rating, passed through unchanged.
    """
    counts = [0] * (MAX_STARS - MIN_STARS + 1)
    skipped = 0
    for review in reviews:
        bucket = _star_bucket(review.rating)
        if bucket is None:
            skipped += 1
            _logger.debug("Skipping review %s with out-of-range rating %r", review.id, review.rating)
            continue
        counts[bucket] += 1

    return RatingSummary(
        distribution=tuple(counts),  # type: ignore[arg-type]
        average=average,
        total=sum(counts),
        skipped=skipped,
    )


def percentage(summary: RatingSummary, stars: int) -> float:
    """Share of *summary*'s counted reviews that gave *stars*, 0-100."""
    return summary.percentage(stars)
