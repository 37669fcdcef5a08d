"""Route metrics returned by the route calculation endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyride._normalize import safe_float
from pyride.models._base import RideBaseModel


class RouteMetrics(RideBaseModel):
    """Driving distance and duration between two points.

    Parameters
    ----------
    distance_km : float
        Driving distance in kilometres.
    duration_minutes : float
        Driving duration in minutes without traffic.
    duration_in_traffic_minutes : float or None
        Duration with current traffic, when the routing provider has it.
    """

    distance_km: float = Field(validation_alias=AliasChoices("distance_km", "distanceKm"))
    duration_minutes: float = Field(validation_alias=AliasChoices("duration_minutes", "durationMinutes"))
    duration_in_traffic_minutes: float | None = Field(
        default=None,
        validation_alias=AliasChoices("duration_in_traffic_minutes", "durationInTrafficMinutes"),
    )

    @field_validator("distance_km", "duration_minutes", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> float:
        parsed = safe_float(value)
        if parsed is None or parsed < 0:
            raise ValueError(f"expected a non-negative number, got {value!r}")
        return parsed

    @field_validator("duration_in_traffic_minutes", mode="before")
    @classmethod
    def _optional_number(cls, value: Any) -> float | None:
        return safe_float(value)
