"""Pure note/event item model - no I/O dependencies."""

import logging
from dataclasses import dataclass
from datetime import datetime

import pendulum

logger = logging.getLogger(__name__)

EVENT_KIND = "event"
NOTE_KIND = "note"


class MalformedItem(ValueError):
    """Raised when an item's start timestamp cannot be parsed or normalized."""

    pass


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Normalize a start value into a datetime.

    Strings are parsed as ISO-8601. Raises MalformedItem for anything else.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise MalformedItem(f"Unsupported start value: {value!r}")
    try:
        # Offset-less values stay naive: wall-clock time in the viewer's zone
        parsed = pendulum.parse(value.strip(), tz=None)
    except ValueError as e:
        raise MalformedItem(f"Unparseable start {value!r}: {e}") from e
    if not isinstance(parsed, datetime):
        raise MalformedItem(f"Start {value!r} is not a point in time")
    return parsed


@dataclass
class ScheduledItem:
    """A note or event as supplied by the note store."""

    body: str
    start: datetime | None = None
    kind: str = NOTE_KIND
    id: str | None = None
    placeholder: bool = False

    def __post_init__(self):
        # Raises MalformedItem for strings that are not timestamps
        if self.start is not None:
            self.start = parse_timestamp(self.start)

    @property
    def is_scheduled(self) -> bool:
        return self.start is not None

    @property
    def is_event(self) -> bool:
        return self.kind == EVENT_KIND

    @classmethod
    def placeholder_at(cls, start: datetime) -> "ScheduledItem":
        """Empty event filling a quarter-slot that has no real item."""
        return cls(body="", start=start, kind=EVENT_KIND, placeholder=True)

    @classmethod
    def from_api(cls, data: dict) -> "ScheduledItem":
        """
        Create a ScheduledItem from the notes API shape.

        A start that cannot be parsed is logged and the item is kept as
        unscheduled, so one bad record never hides the rest of the agenda.
        """
        start = None
        raw_start = data.get("start")
        if raw_start:
            try:
                start = parse_timestamp(raw_start)
            except MalformedItem as e:
                logger.warning(f"Treating note {data.get('_id')} as unscheduled: {e}")
        return cls(
            id=data.get("_id"),
            body=data.get("body", "") or "",
            start=start,
            kind=data.get("type", NOTE_KIND) or NOTE_KIND,
        )

    def to_api(self) -> dict:
        """Serialize to the notes API shape. Placeholder state is never sent."""
        data: dict = {
            "body": self.body,
            "type": self.kind,
            "start": self.start.isoformat() if self.start else None,
        }
        if self.id:
            data["_id"] = self.id
        return data


def filter_by_kind(items: list[ScheduledItem], kind: str | None) -> list[ScheduledItem]:
    """Filter items to one kind. None keeps everything."""
    if kind is None:
        return list(items)
    return [i for i in items if i.kind == kind]
