"""Notes API adapter - HTTP client for the notes backend."""

import logging

import requests

from daybook.core.items import ScheduledItem

logger = logging.getLogger(__name__)

NOTES_ENDPOINT = "/api/notes"


class NotesApiAdapter:
    """
    Notes backend HTTP adapter.

    Implements NoteStore protocol. No business logic and no retries - just I/O.
    HTTP failures propagate as requests exceptions.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: int = 10,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _url(self, suffix: str = "") -> str:
        return f"{self.base_url}{NOTES_ENDPOINT}{suffix}"

    def fetch_notes(self, kind: str | None = None) -> list[ScheduledItem]:
        """Fetch notes in server order, optionally only one kind."""
        params = {"type": kind} if kind else None
        resp = self._session.get(self._url(), params=params, timeout=self.timeout)
        resp.raise_for_status()
        notes = [ScheduledItem.from_api(n) for n in resp.json()]
        # Older servers ignore the filter
        if kind:
            notes = [n for n in notes if n.kind == kind]
        logger.debug(f"Fetched {len(notes)} notes from {self.base_url}")
        return notes

    def save_note(self, note: ScheduledItem) -> ScheduledItem:
        """Create a note (POST) or update it by id (PUT)."""
        payload = note.to_api()
        if note.id:
            resp = self._session.put(self._url(f"/{note.id}"), json=payload, timeout=self.timeout)
        else:
            resp = self._session.post(self._url(), json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return ScheduledItem.from_api(resp.json())
