"""Fixed partition of a day into hour buckets and quarter-hour slots."""

from datetime import date, datetime, time

HOURS_PER_DAY = 24
QUARTER_OFFSETS = (0, 15, 30, 45)


def hour_buckets() -> list[int]:
    """The 24 hour buckets of a civil day, in order."""
    return list(range(HOURS_PER_DAY))


def quarter_offsets() -> list[int]:
    """Minute offsets of the quarter-slots within every hour bucket."""
    return list(QUARTER_OFFSETS)


def slot_timestamp(reference_date: date | datetime, hour: int, minute: int) -> datetime:
    """
    Exact timestamp of a slot on the reference date's calendar day.

    Seconds and microseconds are zero. The reference's tzinfo is kept, so a
    slot is expressed in the same local representation as the day it belongs to.
    """
    tz = getattr(reference_date, "tzinfo", None)
    day = reference_date.date() if isinstance(reference_date, datetime) else reference_date
    return datetime.combine(day, time(hour, minute), tzinfo=tz)


def to_local(value: datetime, anchor: date | datetime) -> datetime:
    """
    Express a timestamp in the anchor's local representation.

    Aware values are converted to the anchor's zone. Naive values are taken to
    already be wall-clock time in that zone. With a naive anchor, an aware value
    keeps its own wall-clock time.
    """
    tz = getattr(anchor, "tzinfo", None)
    if tz is None:
        return value.replace(tzinfo=None)
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)
