"""
Application state for the caregiving log.

CareTracker is constructed once at startup and handed to the presentation
layer. It owns every store and the feeding timer; all mutation goes through
the methods below, and all reads return immutable snapshots.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog

from carelog.config import AppConfig
from carelog.domain.models import (
    DailyStats,
    FeedingSession,
    Note,
    SleepEvent,
    SleepEventKind,
    TimerPhase,
    TimerSnapshot,
)
from carelog.services.daily_stats import compute_daily_stats
from carelog.services.feeding_log import FeedingLog
from carelog.services.feeding_timer import FeedingTimer
from carelog.services.note_log import NoteLog
from carelog.services.sleep_log import SleepLog
from carelog.services.time_format import Clock, make_clock

logger = structlog.get_logger(__name__)


class CareTracker:
    """Sleep, feeding and note logs plus the feeding timer, behind one object."""

    def __init__(self, config: AppConfig | None = None, clock: Clock | None = None) -> None:
        self.config = config or AppConfig()
        self.clock: Clock = clock or make_clock(self.config.display.timezone)

        limit = self.config.tracking.history_limit
        self.sleep_log = SleepLog(max_entries=limit, clock=self.clock)
        self.feeding_log = FeedingLog(max_entries=limit, clock=self.clock)
        self.note_log = NoteLog(clock=self.clock)
        self.timer = FeedingTimer(
            self.feeding_log, tick_seconds=self.config.tracking.timer_tick_seconds
        )
        self.logger = logger.bind(component="care_tracker")
        self.logger.info(
            "tracker_initialized",
            history_limit=limit,
            timer_tick_seconds=self.config.tracking.timer_tick_seconds,
        )

    # Sleep

    def record_sleep_event(self, kind: SleepEventKind | str) -> SleepEvent:
        return self.sleep_log.record_event(kind)

    def recent_sleep_events(self, n: int | None = None) -> tuple[SleepEvent, ...]:
        return self.sleep_log.all() if n is None else self.sleep_log.recent(n)

    # Feeding

    def start_timer(self) -> None:
        self.timer.start()

    def pause_timer(self) -> None:
        self.timer.pause()

    def toggle_timer(self) -> TimerPhase:
        return self.timer.toggle()

    def reset_timer(self) -> None:
        self.timer.reset()

    def save_feeding_session(self, elapsed_seconds: int | None = None) -> FeedingSession | None:
        """Commit the timed feeding; None (and no change) when nothing was timed."""
        return self.timer.save_session(elapsed_seconds)

    def timer_snapshot(self) -> TimerSnapshot:
        return self.timer.snapshot()

    def recent_feeding_sessions(self, n: int | None = None) -> tuple[FeedingSession, ...]:
        return self.feeding_log.all() if n is None else self.feeding_log.recent(n)

    # Notes

    def add_note(self, content: str) -> Note | None:
        return self.note_log.add_note(content)

    def notes(self) -> tuple[Note, ...]:
        return self.note_log.all()

    # Summary

    def daily_stats(self) -> DailyStats:
        """Today's counts and totals, recomputed against the clock on every call."""
        return compute_daily_stats(
            self.sleep_log, self.feeding_log, self.clock(), self.config.display
        )

    # Lifecycle

    async def aclose(self) -> None:
        await self.timer.aclose()
        self.logger.info("tracker_closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator["CareTracker"]:
        try:
            yield self
        finally:
            await self.aclose()
