"""Unbounded log of free-text observations."""

from carelog.domain.models import Note
from carelog.services.record_log import RecordLog
from carelog.services.time_format import Clock


class NoteLog(RecordLog[Note]):
    """Every note written during the process lifetime, newest first."""

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__(max_entries=None, clock=clock)

    def add_note(self, content: str) -> Note | None:
        """
        Store ``content`` verbatim.

        Blank content (empty once stripped) is silently ignored and returns None,
        so callers may invoke this directly without pre-checking.
        """
        if not content.strip():
            self.logger.debug("note_skipped_blank")
            return None

        note = Note(content=content, timestamp=self._clock())
        self._prepend(note)
        self.logger.info("note_added", note_id=note.id, length=len(content))
        return note
