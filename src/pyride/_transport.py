"""HTTP transport for the ride-hailing JSON API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyride._constants import AUTH_FAILURE_STATUSES, USER_AGENT
from pyride._redact import redact_for_log
from pyride.config import RideConfig
from pyride.exceptions import RideApiError, RideAuthenticationError, RideTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Endpoint modules only need these two calls, which keeps test doubles
    trivial while the production implementation stays concrete.
    """

    async def get_json(self, endpoint: str, *, access_token: str | None = None) -> Any:
        ...

    async def post_json(
        self,
        endpoint: str,
        payload: Mapping[str, Any],
        *,
        access_token: str | None = None,
    ) -> Any:
        ...


def _error_message(body: Any) -> str:
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return ""


class JsonTransport:
    """aiohttp-backed JSON transport with optional bearer authentication."""

    def __init__(self, config: RideConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _headers(self, access_token: str | None) -> dict[str, str]:
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        token = access_token or self._config.access_token
        if token:
            headers["authorization"] = f"Bearer {token}"
        return headers

    async def get_json(self, endpoint: str, *, access_token: str | None = None) -> Any:
        return await self._request("GET", endpoint, None, access_token)

    async def post_json(
        self,
        endpoint: str,
        payload: Mapping[str, Any],
        *,
        access_token: str | None = None,
    ) -> Any:
        return await self._request("POST", endpoint, payload, access_token)

    async def _request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None,
        access_token: str | None,
    ) -> Any:
        url = f"{self._config.base_url}{endpoint}"
        headers = self._headers(access_token)
        if payload is not None:
            headers["content-type"] = "application/json"

        _logger.debug("%s %s", method, url)
        if self._config.api_trace_enabled and payload is not None:
            _logger.debug("Request body for %s: %s", endpoint, redact_for_log(dict(payload)))

        try:
            async with self._http.request(
                method,
                url,
                data=json.dumps(payload) if payload is not None else None,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except TimeoutError as exc:
            raise RideTransportError(f"Request to {endpoint} timed out", endpoint=endpoint) from exc
        except aiohttp.ClientError as exc:
            raise RideTransportError(f"Request to {endpoint} failed: {exc}", endpoint=endpoint) from exc

        try:
            body = json.loads(text) if text else None
        except json.JSONDecodeError as exc:
            raise RideTransportError(
                f"Invalid JSON from {endpoint} (HTTP {status}): {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            ) from exc

        if self._config.api_trace_enabled:
            _logger.debug("Response %s from %s: %s", status, endpoint, redact_for_log(body))

        if status in AUTH_FAILURE_STATUSES:
            raise RideAuthenticationError(
                _error_message(body) or f"HTTP {status} from {endpoint}",
                code=str(status),
                endpoint=endpoint,
            )
        if status >= 400:
            message = _error_message(body)
            if message:
                raise RideApiError(message, code=str(status), endpoint=endpoint)
            raise RideTransportError(
                f"HTTP {status} from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )
        return body
