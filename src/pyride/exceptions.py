"""Custom exception hierarchy for pyride.

Only the boundary layer (transport and endpoint modules) raises these.
The stores and the rating aggregator have no failure modes of their own.
"""

from __future__ import annotations


class RideError(Exception):
    """Base exception for all pyride errors."""


class RideConfigError(RideError):
    """Invalid or missing configuration."""


class RideTransportError(RideError):
    """HTTP-level failure (network, unexpected status, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RideApiError(RideError):
    """API answered with an error body (``{"error": ...}``)."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        endpoint: str = "",
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)


class RideAuthenticationError(RideApiError):
    """Access token missing, expired or rejected (HTTP 401/403)."""
