"""
Domain models for the caregiving log.

Records are immutable once created and are only ever produced by their owning
log. They use Pydantic for validation but carry no behavior of their own.
"""

from datetime import date, datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


def new_record_id() -> str:
    """Opaque identifier, unique regardless of how close together records are created."""
    return uuid4().hex


class SleepEventKind(str, Enum):
    """Sleep transitions a caregiver can record."""

    SLEEP_START = "sleep"
    WAKE = "wake"


class TimerPhase(str, Enum):
    """Feeding timer states."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class SleepEvent(BaseModel):
    """A single sleep or wake transition."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_record_id)
    kind: SleepEventKind
    timestamp: datetime


class FeedingSession(BaseModel):
    """A completed feeding, summarized by its total duration."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_record_id)
    duration_seconds: int = Field(gt=0, strict=True, description="Whole seconds timed")
    timestamp: datetime


class Note(BaseModel):
    """Free-text observation. Content is kept exactly as entered."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_record_id)
    content: str
    timestamp: datetime

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("note content must not be blank")
        return v


class TimerSnapshot(BaseModel):
    """Point-in-time view of the feeding timer for rendering."""

    model_config = ConfigDict(frozen=True)

    phase: TimerPhase
    elapsed_seconds: int = Field(ge=0)
    display: str


class DailyStats(BaseModel):
    """Same-day summary derived from the sleep and feeding logs."""

    model_config = ConfigDict(frozen=True)

    day: date
    today_sleep_count: int = Field(ge=0)
    today_feeding_sessions: tuple[FeedingSession, ...] = ()
    today_total_feeding_display: str = Field(description="Total feeding time as MM:SS")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def today_feeding_count(self) -> int:
        return len(self.today_feeding_sessions)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def today_total_feeding_seconds(self) -> int:
        return sum(s.duration_seconds for s in self.today_feeding_sessions)
