"""
Same-day aggregation over the sleep and feeding logs.

Nothing here is cached: "today" is whatever calendar date ``now`` falls on,
so a record drops out of the summary once local midnight passes.
"""

from datetime import date, datetime

from carelog.config import DisplayConfig
from carelog.domain.models import DailyStats
from carelog.services.feeding_log import FeedingLog
from carelog.services.sleep_log import SleepLog
from carelog.services.time_format import format_duration, to_display_zone


def local_day(timestamp: datetime, config: DisplayConfig) -> date:
    """Calendar date of ``timestamp`` in the observer's zone, as ``format_date`` shows it."""
    if timestamp.tzinfo is None:
        raise ValueError(f"Timestamp must be timezone-aware: {timestamp!r}")
    return to_display_zone(timestamp, config).date()


def compute_daily_stats(
    sleep_log: SleepLog,
    feeding_log: FeedingLog,
    now: datetime,
    display: DisplayConfig | None = None,
) -> DailyStats:
    """Summarize the records whose calendar date matches ``now``'s."""
    display = display or DisplayConfig()
    today = local_day(now, display)

    today_sleep_count = sum(
        1 for event in sleep_log if local_day(event.timestamp, display) == today
    )
    today_sessions = tuple(
        session for session in feeding_log if local_day(session.timestamp, display) == today
    )
    total_seconds = sum(s.duration_seconds for s in today_sessions)

    return DailyStats(
        day=today,
        today_sleep_count=today_sleep_count,
        today_feeding_sessions=today_sessions,
        today_total_feeding_display=format_duration(total_seconds),
    )
