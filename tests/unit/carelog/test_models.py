"""Tests for the caregiving domain models."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from carelog.domain.models import (
    DailyStats,
    FeedingSession,
    Note,
    SleepEvent,
    SleepEventKind,
    TimerPhase,
    TimerSnapshot,
)

LOCAL_TZ = timezone(timedelta(hours=-3))

NOW = datetime(2026, 10, 19, 9, 30, tzinfo=LOCAL_TZ)


class TestRecords:
    def test_records_are_immutable(self) -> None:
        event = SleepEvent(kind=SleepEventKind.WAKE, timestamp=NOW)

        with pytest.raises(ValueError, match="frozen"):
            event.kind = SleepEventKind.SLEEP_START  # type: ignore[misc]

    def test_ids_are_unique_even_when_created_in_the_same_instant(self) -> None:
        ids = {FeedingSession(duration_seconds=1, timestamp=NOW).id for _ in range(1000)}
        assert len(ids) == 1000

    def test_sleep_kind_accepts_string_values(self) -> None:
        event = SleepEvent(kind="sleep", timestamp=NOW)  # type: ignore[arg-type]
        assert event.kind is SleepEventKind.SLEEP_START

    @pytest.mark.parametrize("duration", [0, -5])
    def test_feeding_session_requires_positive_duration(self, duration: int) -> None:
        with pytest.raises(ValidationError):
            FeedingSession(duration_seconds=duration, timestamp=NOW)

    def test_feeding_session_rejects_fractional_duration(self) -> None:
        with pytest.raises(ValidationError):
            FeedingSession(duration_seconds=1.5, timestamp=NOW)  # type: ignore[arg-type]

    def test_note_keeps_content_verbatim(self) -> None:
        note = Note(content="  fussy after bath \n", timestamp=NOW)
        assert note.content == "  fussy after bath \n"

    @pytest.mark.parametrize("content", ["", "   ", "\t\n"])
    def test_note_rejects_blank_content(self, content: str) -> None:
        with pytest.raises(ValidationError, match="must not be blank"):
            Note(content=content, timestamp=NOW)


class TestDerivedModels:
    def test_daily_stats_counts_and_totals(self) -> None:
        sessions = (
            FeedingSession(duration_seconds=600, timestamp=NOW),
            FeedingSession(duration_seconds=45, timestamp=NOW),
        )
        stats = DailyStats(
            day=date(2026, 10, 19),
            today_sleep_count=3,
            today_feeding_sessions=sessions,
            today_total_feeding_display="10:45",
        )

        assert stats.today_feeding_count == 2
        assert stats.today_total_feeding_seconds == 645
        dumped = stats.model_dump()
        assert dumped["today_feeding_count"] == 2
        assert dumped["today_total_feeding_seconds"] == 645

    def test_timer_snapshot_rejects_negative_elapsed(self) -> None:
        with pytest.raises(ValidationError):
            TimerSnapshot(phase=TimerPhase.IDLE, elapsed_seconds=-1, display="00:00")
