"""End-to-end tests for CareTracker, the application state object."""

import asyncio

import pytest

from carelog.config import AppConfig, TrackingConfig
from carelog.domain.models import SleepEventKind, TimerPhase
from carelog.services.tracker import CareTracker


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(tracking=TrackingConfig(history_limit=10, timer_tick_seconds=0.01))


def test_each_tracker_owns_its_own_state(config: AppConfig, clock) -> None:
    a = CareTracker(config, clock=clock)
    b = CareTracker(config, clock=clock)

    a.record_sleep_event(SleepEventKind.SLEEP_START)
    a.add_note("first tooth?")

    assert len(a.recent_sleep_events()) == 1
    assert b.recent_sleep_events() == ()
    assert b.notes() == ()


def test_history_limit_comes_from_config(clock) -> None:
    tracker = CareTracker(AppConfig(tracking=TrackingConfig(history_limit=3)), clock=clock)
    for _ in range(5):
        tracker.record_sleep_event("wake")
        tracker.save_feeding_session(30)

    assert len(tracker.recent_sleep_events()) == 3
    assert len(tracker.recent_feeding_sessions()) == 3
    assert len(tracker.recent_sleep_events(2)) == 2


def test_notes_guard_and_order(config: AppConfig, clock) -> None:
    tracker = CareTracker(config, clock=clock)

    assert tracker.add_note("   ") is None
    first = tracker.add_note("  ok  ")
    second = tracker.add_note("slept through")

    assert tracker.notes() == (second, first)
    assert first is not None and first.content.strip() == "ok"


def test_daily_stats_follow_the_clock(config: AppConfig, clock) -> None:
    tracker = CareTracker(config, clock=clock)
    clock.advance(days=-1)
    tracker.save_feeding_session(500)
    tracker.record_sleep_event("sleep")
    clock.advance(days=1)
    tracker.save_feeding_session(65)
    tracker.record_sleep_event("wake")

    stats = tracker.daily_stats()

    assert stats.today_sleep_count == 1
    assert stats.today_feeding_count == 1
    assert stats.today_total_feeding_seconds == 65
    assert stats.today_total_feeding_display == "01:05"


async def test_timed_feeding_flow(config: AppConfig, clock) -> None:
    async with CareTracker(config, clock=clock).session() as tracker:
        assert tracker.save_feeding_session() is None

        assert tracker.toggle_timer() is TimerPhase.RUNNING
        await asyncio.sleep(0.1)
        assert tracker.toggle_timer() is TimerPhase.PAUSED

        elapsed = tracker.timer_snapshot().elapsed_seconds
        assert elapsed > 0

        session = tracker.save_feeding_session()

        assert session is not None and session.duration_seconds == elapsed
        assert tracker.timer_snapshot().phase is TimerPhase.IDLE
        assert tracker.timer_snapshot().elapsed_seconds == 0
        assert tracker.daily_stats().today_total_feeding_seconds == elapsed


async def test_session_teardown_stops_running_timer(config: AppConfig, clock) -> None:
    async with CareTracker(config, clock=clock).session() as tracker:
        tracker.start_timer()
        task = tracker.timer._tick_task

    assert task is not None and task.done()
    with pytest.raises(RuntimeError):
        tracker.start_timer()


async def test_reset_discards_timed_feeding(config: AppConfig, clock) -> None:
    async with CareTracker(config, clock=clock).session() as tracker:
        tracker.start_timer()
        await asyncio.sleep(0.05)
        tracker.pause_timer()
        tracker.reset_timer()

        assert tracker.save_feeding_session() is None
        assert tracker.recent_feeding_sessions() == ()
