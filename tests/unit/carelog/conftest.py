"""Shared fixtures for the carelog unit tests."""

from datetime import datetime, timedelta, timezone

import pytest

# Observer sits at UTC-3 so calendar-day edges differ from UTC
LOCAL_TZ = timezone(timedelta(hours=-3))


class ManualClock:
    """Clock the test moves by hand."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now += timedelta(**delta)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(datetime(2026, 10, 19, 9, 30, tzinfo=LOCAL_TZ))
