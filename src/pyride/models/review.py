"""Driver review models."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pyride._constants import MAX_STARS, MIN_STARS
from pyride.models._base import RideBaseModel


class ReviewAuthor(RideBaseModel):
    """Display identity of the client who wrote a review."""

    full_name: str = ""
    profile_picture_url: str | None = None

    @property
    def initials(self) -> str:
        """Up to two uppercase initials, used when there is no avatar."""
        return "".join(part[0] for part in self.full_name.split()[:2]).upper()


class ReviewRecord(RideBaseModel):
    """A single rating left for a driver.

    ``rating`` is not range-checked here; see :func:`pyride.ratings.aggregate`
    for how values outside 1..5 are treated.
    """

    id: str | None = None
    rating: int
    text: str | None = Field(default=None, validation_alias=AliasChoices("review", "text"))
    created_at: datetime | None = None
    author: ReviewAuthor = Field(
        default_factory=ReviewAuthor,
        validation_alias=AliasChoices("client", "author"),
    )


class RatingSummary(BaseModel):
    """Star distribution for a page of reviews plus the driver's overall average.

    Parameters
    ----------
    distribution : tuple of int
        Review counts per star; index 0 holds one-star reviews.
    average : float
        Caller-supplied running average for the driver. Not derived from
        ``distribution``, which may describe only a subset of reviews.
    total : int
        Number of reviews counted into ``distribution``.
    skipped : int
        Number of reviews dropped because their rating was outside 1..5.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    distribution: tuple[int, int, int, int, int] = (0, 0, 0, 0, 0)
    average: float = 0.0
    total: int = 0
    skipped: int = 0

    @property
    def has_reviews(self) -> bool:
        return self.total > 0

    def count(self, stars: int) -> int:
        if not MIN_STARS <= stars <= MAX_STARS:
            raise ValueError(f"stars must be between {MIN_STARS} and {MAX_STARS}, got {stars}")
        return self.distribution[stars - MIN_STARS]

    def percentage(self, stars: int) -> float:
        """Share of counted reviews with *stars*, 0-100. Zero when there are none."""
        if self.total == 0:
            return 0.0
        return self.count(stars) / self.total * 100

    def rows(self) -> list[tuple[int, int, float]]:
        """``(stars, count, percentage)`` from five stars down to one."""
        return [(stars, self.count(stars), self.percentage(stars)) for stars in range(MAX_STARS, MIN_STARS - 1, -1)]
