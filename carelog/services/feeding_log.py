"""Bounded log of completed feeding sessions."""

from carelog.domain.models import FeedingSession
from carelog.services.record_log import DEFAULT_HISTORY_LIMIT, RecordLog
from carelog.services.time_format import Clock


class FeedingLog(RecordLog[FeedingSession]):
    """Keeps the most recent feeding sessions, newest first.

    Sessions normally arrive through ``FeedingTimer.save_session``.
    """

    def __init__(self, max_entries: int = DEFAULT_HISTORY_LIMIT, clock: Clock | None = None) -> None:
        super().__init__(max_entries=max_entries, clock=clock)

    def build(self, duration_seconds: int) -> FeedingSession:
        """Create a session stamped now without storing it."""
        return FeedingSession(duration_seconds=duration_seconds, timestamp=self._clock())

    def commit(self, duration_seconds: int) -> FeedingSession:
        """Create and store a session stamped now."""
        return self.add(self.build(duration_seconds))

    def add(self, session: FeedingSession) -> FeedingSession:
        self._prepend(session)
        self.logger.info(
            "feeding_session_saved",
            session_id=session.id,
            duration_seconds=session.duration_seconds,
        )
        return session
