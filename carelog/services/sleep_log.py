"""Bounded log of sleep and wake transitions."""

from carelog.domain.models import SleepEvent, SleepEventKind
from carelog.services.record_log import DEFAULT_HISTORY_LIMIT, RecordLog
from carelog.services.time_format import Clock


class SleepLog(RecordLog[SleepEvent]):
    """Keeps the most recent sleep/wake events, newest first."""

    def __init__(self, max_entries: int = DEFAULT_HISTORY_LIMIT, clock: Clock | None = None) -> None:
        super().__init__(max_entries=max_entries, clock=clock)

    def record_event(self, kind: SleepEventKind | str) -> SleepEvent:
        """Record a transition at the current instant. Always succeeds."""
        event = SleepEvent(kind=SleepEventKind(kind), timestamp=self._clock())
        self._prepend(event)
        self.logger.info("sleep_event_recorded", kind=event.kind.value, event_id=event.id)
        return event
