"""Note store interface."""

from typing import Protocol

from daybook.core.items import ScheduledItem


class NoteStore(Protocol):
    """Interface for reading and writing notes in any backend."""

    def fetch_notes(self, kind: str | None = None) -> list[ScheduledItem]:
        """Fetch notes in store order, optionally only one kind."""
        ...

    def save_note(self, note: ScheduledItem) -> ScheduledItem:
        """Create or update a note. Returns the persisted record with its id."""
        ...
