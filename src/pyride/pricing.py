"""Trip cost estimation."""

from __future__ import annotations

from pyride._normalize import round_half_up
from pyride.models.booking import TripEstimate
from pyride.models.route import RouteMetrics


def estimate_cost(hourly_rate: float, duration_minutes: float) -> int:
    """Driver's hourly rate times trip duration, rounded to whole Naira.

    Drivers are hired by the hour, so distance does not enter the price.
    """
    if hourly_rate < 0:
        raise ValueError(f"hourly_rate must be non-negative, got {hourly_rate}")
    if duration_minutes < 0:
        raise ValueError(f"duration_minutes must be non-negative, got {duration_minutes}")
    return round_half_up(hourly_rate * duration_minutes / 60)


def estimate_trip(metrics: RouteMetrics, hourly_rate: float) -> TripEstimate:
    """Build the full estimate triple for a calculated route."""
    return TripEstimate(
        cost=estimate_cost(hourly_rate, metrics.duration_minutes),
        duration_minutes=metrics.duration_minutes,
        distance_km=metrics.distance_km,
    )
