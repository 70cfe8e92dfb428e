"""Functional core - pure agenda logic with no I/O."""

from .items import ScheduledItem, MalformedItem, parse_timestamp, filter_by_kind
from .slots import hour_buckets, quarter_offsets, slot_timestamp
from .binning import bin_items, find_for_slot, find_collisions
from .active import ActiveSlot, resolve_active_slot
from .navigation import RangeUnit, Direction, InvalidRangeUnit, step, period_bounds
from .agenda import HourRenderSlot, QuarterSlot, render_agenda, format_hour_label

__all__ = [
    # Items
    "ScheduledItem",
    "MalformedItem",
    "parse_timestamp",
    "filter_by_kind",
    # Slot grid
    "hour_buckets",
    "quarter_offsets",
    "slot_timestamp",
    # Binning
    "bin_items",
    "find_for_slot",
    "find_collisions",
    # Active hour
    "ActiveSlot",
    "resolve_active_slot",
    # Navigation
    "RangeUnit",
    "Direction",
    "InvalidRangeUnit",
    "step",
    "period_bounds",
    # Agenda
    "HourRenderSlot",
    "QuarterSlot",
    "render_agenda",
    "format_hour_label",
]
