"""
Clock and formatting helpers shared by the stores and the presentation layer.

Instants are captured once, timezone-aware, and only converted when rendered.
"""

from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from carelog.config import DisplayConfig

Clock = Callable[[], datetime]


def make_clock(timezone: str | None = None) -> Clock:
    """Return a callable producing the current aware instant.

    Uses the given IANA zone, or the system local zone when ``timezone`` is None.
    """
    if timezone is None:
        return lambda: datetime.now().astimezone()
    zone = ZoneInfo(timezone)
    return lambda: datetime.now(zone)


def format_duration(seconds: int) -> str:
    """Render whole seconds as ``MM:SS``; minutes are not capped at 59."""
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative: {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def to_display_zone(timestamp: datetime, config: DisplayConfig) -> datetime:
    """Convert to the configured zone, or to system local time with its DST rules."""
    if config.timezone is None:
        return timestamp.astimezone()
    return timestamp.astimezone(ZoneInfo(config.timezone))


def format_date(timestamp: datetime, config: DisplayConfig | None = None) -> str:
    """Calendar date of ``timestamp`` in the observer's zone, ``DD/MM/YYYY`` by default."""
    config = config or DisplayConfig()
    return to_display_zone(timestamp, config).strftime(config.date_format)


def format_time_of_day(timestamp: datetime, config: DisplayConfig | None = None) -> str:
    """24-hour ``HH:MM`` of ``timestamp`` in the observer's zone by default."""
    config = config or DisplayConfig()
    return to_display_zone(timestamp, config).strftime(config.time_format)
