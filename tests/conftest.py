"""Shared fixtures for zonedtime tests.

Every test runs in a fresh temporary working directory with no ZONEDTIME_*
environment variables and no cached provider, so configuration lookups are
deterministic regardless of the host.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from zonedtime import registry
from zonedtime.providers.base import TimezoneProvider
from zonedtime.providers.zoneinfo_provider import ZoneInfoProvider

REAL_PROVIDERS = ("zoneinfo", "pytz", "dateutil")


@pytest.fixture(autouse=True)
def reset_active_provider() -> Generator[None, Any, None]:
    """Drop the cached provider before and after each test."""
    registry.reset_provider()
    yield
    registry.reset_provider()


@pytest.fixture(autouse=True)
def clean_test_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Any
) -> Generator[None, Any, None]:
    """Clear ZONEDTIME_* variables and isolate the working directory."""
    for key in list(os.environ):
        if key.startswith("ZONEDTIME_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(params=REAL_PROVIDERS)
def tz_provider(request: pytest.FixtureRequest) -> TimezoneProvider:
    """Each library-backed provider in turn."""
    return registry.build_provider(request.param)


@pytest.fixture
def zoneinfo_provider() -> ZoneInfoProvider:
    return ZoneInfoProvider()


@pytest.fixture
def test_timezone() -> str:
    """Deterministic zone with DST for tests."""
    return "America/New_York"
