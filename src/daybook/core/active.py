"""Pure active-hour resolution - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .slots import HOURS_PER_DAY, to_local

DEFAULT_ACTIVE_HOUR = 7


@dataclass(frozen=True)
class ActiveSlot:
    """Which hour bucket is highlighted and anchored for scrolling."""

    is_today: bool
    active_hour: int
    current_hour: int | None

    @property
    def scroll_target(self) -> int:
        """Hour bucket to scroll into view on every render."""
        return self.active_hour


def resolve_active_slot(
    reference_date: date | datetime,
    now: datetime,
    default_hour: int = DEFAULT_ACTIVE_HOUR,
) -> ActiveSlot:
    """
    Resolve the active hour for a viewed date.

    When the viewed date is today, the active hour is the live current hour.
    Otherwise it is the default hour and there is no current hour.
    Pure function - call again whenever `now` or the viewed date changes.
    """
    if not 0 <= default_hour < HOURS_PER_DAY:
        raise ValueError(f"default_hour must be within 0..23, got {default_hour}")

    local_now = to_local(now, reference_date)
    viewed_day = reference_date.date() if isinstance(reference_date, datetime) else reference_date

    if local_now.date() == viewed_day:
        return ActiveSlot(is_today=True, active_hour=local_now.hour, current_hour=local_now.hour)
    return ActiveSlot(is_today=False, active_hour=default_hour, current_hour=None)
