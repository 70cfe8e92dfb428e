"""Pure agenda layout assembly - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, time

from .active import DEFAULT_ACTIVE_HOUR, ActiveSlot, resolve_active_slot
from .binning import bin_items, find_for_slot
from .items import ScheduledItem
from .slots import hour_buckets, quarter_offsets, slot_timestamp

DEFAULT_LABEL_FORMAT = "%H:%M"


@dataclass
class QuarterSlot:
    """One quarter-hour cell holding exactly one item."""

    minute_offset: int
    item: ScheduledItem

    @property
    def is_placeholder(self) -> bool:
        return self.item.placeholder


@dataclass
class HourRenderSlot:
    """One hour row of the agenda."""

    hour: int
    label: str
    is_active: bool
    is_current: bool
    quarter_slots: list[QuarterSlot]

    def items(self) -> list[ScheduledItem]:
        """Real (non-placeholder) items shown in this hour."""
        return [q.item for q in self.quarter_slots if not q.is_placeholder]


def format_hour_label(hour: int, label_format: str = DEFAULT_LABEL_FORMAT) -> str:
    """Time-of-day label for an hour bucket, independent of any calendar date."""
    return time(hour, 0).strftime(label_format)


def render_agenda(
    reference_date: date | datetime,
    items: list[ScheduledItem],
    now: datetime,
    default_hour: int = DEFAULT_ACTIVE_HOUR,
    label_format: str = DEFAULT_LABEL_FORMAT,
) -> list[HourRenderSlot]:
    """
    Lay out a day as 24 hour rows of 4 quarter-slots each.

    Each slot shows the first item starting in that minute, or a fresh
    placeholder event. Exactly one row is active.
    Pure function - identical inputs give equal output.
    """
    by_hour = bin_items(reference_date, items)
    active: ActiveSlot = resolve_active_slot(reference_date, now, default_hour)

    rows = []
    for hour in hour_buckets():
        quarters = []
        for minutes in quarter_offsets():
            ts = slot_timestamp(reference_date, hour, minutes)
            item = find_for_slot(by_hour[hour], ts) or ScheduledItem.placeholder_at(ts)
            quarters.append(QuarterSlot(minute_offset=minutes, item=item))

        rows.append(
            HourRenderSlot(
                hour=hour,
                label=format_hour_label(hour, label_format),
                is_active=hour == active.active_hour,
                is_current=hour == active.current_hour,
                quarter_slots=quarters,
            )
        )

    return rows
