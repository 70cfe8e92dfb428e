"""Adapters - I/O implementations of ports."""

from .notes_api import NotesApiAdapter
from .file_notes import FileNoteStore
from .system_clock import SystemClock

__all__ = [
    "NotesApiAdapter",
    "FileNoteStore",
    "SystemClock",
]
