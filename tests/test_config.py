from __future__ import annotations

import pytest

from pyride.config import RideConfig
from pyride.exceptions import RideConfigError


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDE_BASE_URL", "https://api.example.com/")
    monkeypatch.setenv("RIDE_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("RIDE_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("RIDE_API_TRACE_ENABLED", "yes")

    config = RideConfig.from_env()

    assert config.base_url == "https://api.example.com"
    assert config.access_token == "tok"
    assert config.request_timeout == 5.0
    assert config.api_trace_enabled is True


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDE_REQUEST_TIMEOUT", "not-a-number")
    monkeypatch.setenv("RIDE_API_TRACE_ENABLED", "1")

    config = RideConfig.from_env(request_timeout=3.0, api_trace_enabled=False)

    assert config.request_timeout == 3.0
    assert config.api_trace_enabled is False


def test_invalid_timeout_env_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDE_REQUEST_TIMEOUT", "soon")

    with pytest.raises(RideConfigError):
        RideConfig.from_env()


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(RideConfigError):
        RideConfig(request_timeout=0)


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RIDE_BASE_URL", "RIDE_ACCESS_TOKEN", "RIDE_REQUEST_TIMEOUT", "RIDE_API_TRACE_ENABLED"):
        monkeypatch.delenv(name, raising=False)

    config = RideConfig.from_env()

    assert config == RideConfig()
