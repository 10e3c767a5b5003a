"""
Single feeding stopwatch driven by the asyncio event loop.

Key patterns:
- One cancellable tick task per RUNNING stretch, created by start()
- Generation token re-checked on every tick so a late wakeup after
  pause/reset/close never advances the count
- Deadlines taken from the loop clock so ticks do not drift
- Async context manager for teardown
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import structlog

from carelog.domain.models import FeedingSession, TimerPhase, TimerSnapshot
from carelog.services.feeding_log import FeedingLog
from carelog.services.time_format import format_duration

logger = structlog.get_logger(__name__)

TimerListener = Callable[[TimerSnapshot], None]


class FeedingTimer:
    """
    Start/pause/reset stopwatch counting whole seconds, committing to a FeedingLog on save.

    Only one feeding can be timed at a time. Elapsed is a non-negative integer that
    only changes while RUNNING (one step per tick) or on reset.
    """

    def __init__(self, feeding_log: FeedingLog, tick_seconds: float = 1.0) -> None:
        if tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {tick_seconds}")
        self.feeding_log = feeding_log
        self.tick_seconds = tick_seconds
        self.logger = logger.bind(component="feeding_timer")

        self._phase = TimerPhase.IDLE
        self._elapsed = 0
        self._tick_task: asyncio.Task[None] | None = None
        self._generation = 0
        self._closed = False
        self._listeners: list[TimerListener] = []

    @property
    def phase(self) -> TimerPhase:
        return self._phase

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._phase is TimerPhase.RUNNING

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self._phase,
            elapsed_seconds=self._elapsed,
            display=format_duration(self._elapsed),
        )

    def add_listener(self, listener: TimerListener) -> None:
        """Call ``listener`` with a fresh snapshot after every tick and transition."""
        self._listeners.append(listener)

    def remove_listener(self, listener: TimerListener) -> None:
        self._listeners.remove(listener)

    def start(self) -> None:
        """IDLE or PAUSED -> RUNNING. No-op when already running.

        Must be called with a running event loop.
        """
        if self._closed:
            raise RuntimeError("Feeding timer is closed")
        if self._phase is TimerPhase.RUNNING:
            return

        loop = asyncio.get_running_loop()
        self._generation += 1
        self._phase = TimerPhase.RUNNING
        self._tick_task = loop.create_task(
            self._run_ticks(self._generation), name="feeding-timer-tick"
        )
        self.logger.info("timer_started", elapsed_seconds=self._elapsed)
        self._notify()

    def pause(self) -> None:
        """RUNNING -> PAUSED. No-op otherwise."""
        if self._phase is not TimerPhase.RUNNING:
            return
        self._cancel_ticks()
        self._phase = TimerPhase.PAUSED
        self.logger.info("timer_paused", elapsed_seconds=self._elapsed)
        self._notify()

    def toggle(self) -> TimerPhase:
        """Pause when running, start otherwise. Returns the resulting phase."""
        if self._phase is TimerPhase.RUNNING:
            self.pause()
        else:
            self.start()
        return self._phase

    def reset(self) -> None:
        """Any phase -> IDLE with elapsed back to zero."""
        self._cancel_ticks()
        self._phase = TimerPhase.IDLE
        self._elapsed = 0
        self.logger.info("timer_reset")
        self._notify()

    def save_session(self, elapsed_seconds: int | None = None) -> FeedingSession | None:
        """
        Commit a feeding session and reset the timer.

        Args:
            elapsed_seconds: Duration to record; defaults to the current elapsed count.

        Returns:
            The stored session, or None when the duration is zero (nothing changes).
        """
        duration = self._elapsed if elapsed_seconds is None else elapsed_seconds
        if duration == 0:
            self.logger.debug("feeding_save_skipped_zero")
            return None

        # Validated before anything is mutated: log and timer change together or not at all
        session = self.feeding_log.build(duration)
        self.feeding_log.add(session)
        self.reset()
        return session

    def close(self) -> None:
        """Stop ticking for good. Further start() calls raise RuntimeError."""
        if self._phase is TimerPhase.RUNNING:
            self._phase = TimerPhase.PAUSED
        self._cancel_ticks()
        self._closed = True
        self.logger.info("timer_closed", elapsed_seconds=self._elapsed)

    async def aclose(self) -> None:
        """Close and wait for the tick task to finish cancelling."""
        task = self._tick_task
        self.close()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    @asynccontextmanager
    async def session(self) -> AsyncIterator["FeedingTimer"]:
        """Scope the timer's lifetime; the tick task never outlives the block."""
        try:
            yield self
        finally:
            await self.aclose()

    def _cancel_ticks(self) -> None:
        self._generation += 1
        if self._tick_task is not None:
            self._tick_task.cancel()
            self._tick_task = None

    async def _run_ticks(self, generation: int) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()

        while True:
            deadline += self.tick_seconds
            await asyncio.sleep(max(0.0, deadline - loop.time()))

            if generation != self._generation or self._phase is not TimerPhase.RUNNING:
                return

            self._elapsed += 1
            self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                # A broken view must not stop the clock
                self.logger.exception("timer_listener_failed", error=str(e))
