"""Pytest fixtures for NMEA decoding tests."""

import time
from collections.abc import Iterator

import pytest

# POSIX TZ strings invert the sign: "UTC-7" is seven hours ahead of UTC
_PINNED_TIMEZONE = "UTC-7"


@pytest.fixture
def pinned_timezone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run the test with the host local time zone fixed at UTC+7."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", _PINNED_TIMEZONE)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
