"""Ports - interfaces/protocols for external dependencies."""

from .note_store import NoteStore
from .clock import Clock

__all__ = [
    "NoteStore",
    "Clock",
]
