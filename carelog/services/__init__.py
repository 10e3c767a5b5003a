"""
Core services for the caregiving log.

This package contains the event stores, the feeding timer, the daily
aggregation and the tracker that ties them together.
"""

from .daily_stats import compute_daily_stats
from .feeding_log import FeedingLog
from .feeding_timer import FeedingTimer
from .note_log import NoteLog
from .record_log import RecordLog
from .sleep_log import SleepLog
from .time_format import format_date, format_duration, format_time_of_day, make_clock
from .tracker import CareTracker

__all__ = [
    "CareTracker",
    "FeedingLog",
    "FeedingTimer",
    "NoteLog",
    "RecordLog",
    "SleepLog",
    "compute_daily_stats",
    "format_date",
    "format_duration",
    "format_time_of_day",
    "make_clock",
]
