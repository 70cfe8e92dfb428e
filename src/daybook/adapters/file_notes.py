"""File-based note storage adapter."""

import json
import logging
import uuid
from pathlib import Path

from daybook.core.items import ScheduledItem, filter_by_kind

logger = logging.getLogger(__name__)


class FileNoteStore:
    """
    JSON file note storage.

    Implements NoteStore protocol. All notes live in one JSON array, in the
    same shape the notes API uses.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read_raw(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupt note file {self.path}: {e}") from e
        if not isinstance(data, list):
            raise ValueError(f"Note file {self.path} must hold a JSON array")
        return data

    def _write_raw(self, data: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))

    def fetch_notes(self, kind: str | None = None) -> list[ScheduledItem]:
        """Fetch notes in file order, optionally only one kind."""
        notes = [ScheduledItem.from_api(n) for n in self._read_raw()]
        return filter_by_kind(notes, kind)

    def save_note(self, note: ScheduledItem) -> ScheduledItem:
        """Insert or replace a note by id, assigning an id to new notes."""
        data = self._read_raw()
        record = note.to_api()

        if note.id:
            for i, existing in enumerate(data):
                if existing.get("_id") == note.id:
                    data[i] = record
                    break
            else:
                data.append(record)
        else:
            record["_id"] = uuid.uuid4().hex
            data.append(record)

        self._write_raw(data)
        logger.debug(f"Saved note {record['_id']} to {self.path}")
        return ScheduledItem.from_api(record)
