"""Agenda controller - wires the pure core to the note store and clock."""

import asyncio
import logging
from dataclasses import replace
from datetime import date, datetime

import pendulum

from .adapters.system_clock import SystemClock
from .config import Config
from .core.active import DEFAULT_ACTIVE_HOUR, ActiveSlot, resolve_active_slot
from .core.agenda import DEFAULT_LABEL_FORMAT, HourRenderSlot, render_agenda
from .core.binning import bin_items, find_collisions
from .core.items import ScheduledItem
from .core.navigation import (
    DEFAULT_WEEK_START,
    Direction,
    RangeUnit,
    as_datetime,
    period_bounds,
    step,
    today as start_of_today,
)
from .ports import Clock, NoteStore

logger = logging.getLogger(__name__)


class AgendaController:
    """
    Composition root for the agenda view.

    Every timestamp handed to the core is first expressed in one configured
    timezone, so binning, "now" tracking and navigation agree on the civil day.
    """

    def __init__(
        self,
        store: NoteStore,
        clock: Clock | None = None,
        timezone: str = "local",
        week_start: int = DEFAULT_WEEK_START,
        default_hour: int = DEFAULT_ACTIVE_HOUR,
        label_format: str = DEFAULT_LABEL_FORMAT,
    ):
        self.store = store
        self.timezone = timezone
        self.clock = clock or SystemClock(timezone)
        self.week_start = week_start
        self.default_hour = default_hour
        self.label_format = label_format

    @classmethod
    def from_config(cls, config: Config, store: NoteStore, clock: Clock | None = None) -> "AgendaController":
        return cls(
            store=store,
            clock=clock,
            timezone=config.timezone,
            week_start=config.week_start,
            default_hour=config.default_active_hour,
            label_format=config.label_format,
        )

    def _reference_day(self, reference_date: date | datetime) -> pendulum.DateTime:
        """Midnight of the reference's own calendar date, in the configured zone."""
        day = reference_date.date() if isinstance(reference_date, datetime) else reference_date
        return as_datetime(day, self.timezone)

    def _now(self, now: datetime | None = None) -> pendulum.DateTime:
        now = now if now is not None else self.clock.now()
        return as_datetime(now, self.timezone).in_tz(self.timezone)

    def render(
        self,
        reference_date: date | datetime,
        items: list[ScheduledItem],
        now: datetime | None = None,
    ) -> list[HourRenderSlot]:
        """Build the 24-row slot layout for a day. `now` defaults to the clock."""
        reference = self._reference_day(reference_date)

        if logger.isEnabledFor(logging.DEBUG):
            for hour, hour_items in bin_items(reference, items).items():
                for hidden in find_collisions(hour_items, reference):
                    logger.debug(f"Item {hidden.id} at {hidden.start} hidden by an earlier item in hour {hour}")

        return render_agenda(
            reference,
            items,
            self._now(now),
            default_hour=self.default_hour,
            label_format=self.label_format,
        )

    def active_slot(self, reference_date: date | datetime, now: datetime | None = None) -> ActiveSlot:
        """Active/current hour for the viewed date, for periodic highlight refresh."""
        return resolve_active_slot(self._reference_day(reference_date), self._now(now), self.default_hour)

    def load_items(self, kind: str | None = None) -> list[ScheduledItem]:
        """Read items from the note store."""
        return self.store.fetch_notes(kind)

    def agenda(self, reference_date: date | datetime, kind: str | None = None) -> list[HourRenderSlot]:
        """Load items from the store and render them for a day."""
        return self.render(reference_date, self.load_items(kind))

    def navigate(
        self,
        current_date: date | datetime,
        unit: RangeUnit | str,
        direction: Direction | str,
    ) -> pendulum.DateTime:
        """Previous/next navigation target. Raises InvalidRangeUnit for unknown units."""
        return step(self._reference_day(current_date), unit, direction, self.week_start, self.timezone)

    def window(self, current_date: date | datetime, unit: RangeUnit | str) -> tuple[pendulum.DateTime, pendulum.DateTime]:
        """Visible [start, end) window of a range unit around a date."""
        return period_bounds(self._reference_day(current_date), unit, self.week_start, self.timezone)

    def today(self) -> pendulum.DateTime:
        """Start of today, per the clock."""
        return start_of_today(self._now(), self.timezone)

    async def on_commit(self, note: ScheduledItem) -> ScheduledItem:
        """
        Save a single-slot edit through the note store.

        Runs the store call in a worker thread. Failures propagate to the
        awaiting caller; nothing is retried or rolled back here.
        """
        if note.placeholder:
            note = replace(note, placeholder=False)
        saved = await asyncio.to_thread(self.store.save_note, note)
        logger.info(f"Committed note {saved.id}")
        return saved
