"""
Newest-first in-memory log shared by the sleep, feeding and note stores.

A bounded log drops its oldest entry when a new one would exceed the limit.
Eviction is normal steady-state behavior, not an error.
"""

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

import structlog
from pydantic import BaseModel

from carelog.services.time_format import Clock, make_clock

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

DEFAULT_HISTORY_LIMIT = 10


class RecordLog(Generic[RecordT]):
    """
    Ordered collection of immutable records, most recent insertion at index 0.

    Subclasses build their record type and call ``_prepend``; callers only ever
    see tuple snapshots, so the log is mutated through its own operations alone.
    """

    def __init__(self, max_entries: int | None = None, clock: Clock | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._clock: Clock = clock or make_clock()
        self._entries: deque[RecordT] = deque(maxlen=max_entries)
        self.logger = logger.bind(component=type(self).__name__)

    def _prepend(self, record: RecordT) -> RecordT:
        if self.max_entries is not None and len(self._entries) == self.max_entries:
            # deque(maxlen) drops from the right on appendleft
            self.logger.debug("record_evicted", evicted_id=getattr(self._entries[-1], "id", None))
        self._entries.appendleft(record)
        return record

    def recent(self, n: int) -> tuple[RecordT, ...]:
        """Up to ``n`` records, newest first."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return tuple(self._entries)[:n]

    def all(self) -> tuple[RecordT, ...]:
        """Every retained record, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(tuple(self._entries))
