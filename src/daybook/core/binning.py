"""Assign scheduled items to hour buckets and quarter-slots - no I/O."""

import logging
from datetime import date, datetime

from .items import MalformedItem, ScheduledItem, parse_timestamp
from .slots import hour_buckets, to_local, truncate_to_minute

logger = logging.getLogger(__name__)


def local_start(item: ScheduledItem, anchor: date | datetime) -> datetime | None:
    """
    Item start in the anchor's local representation, or None if unscheduled.

    Raises MalformedItem if the start cannot be normalized.
    """
    if item.start is None:
        return None
    start = parse_timestamp(item.start)
    try:
        return to_local(start, anchor)
    except (OverflowError, ValueError) as e:
        raise MalformedItem(f"Cannot localize start {item.start!r}: {e}") from e


def bin_items(
    reference_date: date | datetime,
    items: list[ScheduledItem],
) -> dict[int, list[ScheduledItem]]:
    """
    Group items by the hour-of-day of their start.

    All 24 hours are present, possibly empty. Order within an hour follows the
    input. Unscheduled items are dropped; malformed ones are logged and dropped.
    Pure function - no I/O.
    """
    buckets: dict[int, list[ScheduledItem]] = {hour: [] for hour in hour_buckets()}

    for item in items:
        try:
            start = local_start(item, reference_date)
        except MalformedItem as e:
            logger.warning(f"Skipping malformed item {item.id}: {e}")
            continue
        if start is None:
            continue
        buckets[start.hour].append(item)

    return buckets


def find_for_slot(hour_items: list[ScheduledItem], slot_ts: datetime) -> ScheduledItem | None:
    """
    First item whose start falls in the same minute as the slot.

    Later items sharing that minute are not returned for this or any other slot.
    """
    target = truncate_to_minute(slot_ts)
    for item in hour_items:
        try:
            start = local_start(item, slot_ts)
        except MalformedItem:
            continue
        if start is not None and truncate_to_minute(start) == target:
            return item
    return None


def find_collisions(hour_items: list[ScheduledItem], anchor: date | datetime) -> list[ScheduledItem]:
    """Items hidden because an earlier item already starts in the same minute."""
    seen: set[datetime] = set()
    hidden = []
    for item in hour_items:
        try:
            start = local_start(item, anchor)
        except MalformedItem:
            continue
        if start is None:
            continue
        minute = truncate_to_minute(start)
        if minute in seen:
            hidden.append(item)
        else:
            seen.add(minute)
    return hidden
