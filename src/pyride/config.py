"""Client configuration for pyride."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyride._constants import BASE_URL
from pyride.exceptions import RideConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise RideConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class RideConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API base URL of the ride-hailing backend.
    access_token : str or None
        Bearer token of the signed-in user. Usually supplied per identity
        check by :meth:`pyride.client.RideClient.apply_identity`; this is
        only a fallback for scripts.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    api_trace_enabled : bool
        Log redacted request/response bodies at DEBUG level.
    """

    base_url: str = BASE_URL
    access_token: str | None = None
    request_timeout: float = 15.0
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        if self.request_timeout <= 0:
            raise RideConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> RideConfig:
        """Create configuration from environment variables.

        Reads ``RIDE_BASE_URL``, ``RIDE_ACCESS_TOKEN``,
        ``RIDE_REQUEST_TIMEOUT`` and ``RIDE_API_TRACE_ENABLED``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("RIDE_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        token = env.get("RIDE_ACCESS_TOKEN")
        if token:
            config_kwargs["access_token"] = token

        timeout_env = env.get("RIDE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("RIDE_REQUEST_TIMEOUT", timeout_env)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(env.get("RIDE_API_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
