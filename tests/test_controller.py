"""Tests for the agenda controller."""

import asyncio
from datetime import date, datetime, timezone

import pendulum
import pytest

from daybook.config import Config
from daybook.controller import AgendaController
from daybook.core.items import ScheduledItem
from daybook.core.navigation import InvalidRangeUnit, MONDAY


class FakeStore:
    """In-memory NoteStore."""

    def __init__(self, notes=None, fail=False):
        self.notes = list(notes or [])
        self.saved: list[ScheduledItem] = []
        self.fetched_kinds: list[str | None] = []
        self.fail = fail

    def fetch_notes(self, kind=None):
        self.fetched_kinds.append(kind)
        return [n for n in self.notes if kind is None or n.kind == kind]

    def save_note(self, note):
        if self.fail:
            raise RuntimeError("store unavailable")
        self.saved.append(note)
        return ScheduledItem(id=note.id or "new-id", body=note.body, start=note.start, kind=note.kind)


class FixedClock:
    def __init__(self, now):
        self._now = now

    def now(self):
        return self._now


@pytest.fixture
def clock():
    return FixedClock(pendulum.datetime(2024, 3, 15, 14, 40, tz="UTC"))


@pytest.fixture
def controller(clock):
    return AgendaController(FakeStore(), clock=clock, timezone="UTC")


class TestRender:
    def test_uses_clock_for_now(self, controller):
        rows = controller.render(date(2024, 3, 15), [])
        assert [r.hour for r in rows if r.is_current] == [14]

    def test_explicit_now_overrides_clock(self, controller):
        rows = controller.render(date(2024, 3, 15), [], now=datetime(2024, 3, 15, 6, 5, tzinfo=timezone.utc))
        assert [r.hour for r in rows if r.is_current] == [6]

    def test_items_and_now_localized_to_configured_zone(self):
        clock = FixedClock(pendulum.datetime(2024, 3, 16, 2, 30, tz="UTC"))
        controller = AgendaController(FakeStore(), clock=clock, timezone="America/Toronto")
        sync = ScheduledItem(body="sync", start=datetime(2024, 3, 15, 13, 15, tzinfo=timezone.utc))

        rows = controller.render(date(2024, 3, 15), [sync])

        assert rows[9].quarter_slots[1].item is sync
        assert [r.hour for r in rows if r.is_current] == [22]

    def test_offset_less_api_start_is_local_wall_time(self, clock):
        controller = AgendaController(FakeStore(), clock=clock, timezone="America/Toronto")
        standup = ScheduledItem.from_api(
            {"_id": "n1", "body": "standup", "start": "2024-03-15T09:15:00", "type": "event"}
        )

        rows = controller.render(date(2024, 3, 15), [standup])

        placed = [(r.hour, q.minute_offset) for r in rows for q in r.quarter_slots if q.item is standup]
        assert placed == [(9, 15)]

    def test_reference_keeps_its_own_calendar_date(self, controller):
        rows = controller.render(datetime(2024, 3, 15, 23, 59), [])
        assert rows[0].quarter_slots[0].item.start.date() == date(2024, 3, 15)

    def test_other_day(self, controller):
        rows = controller.render(date(2024, 3, 10), [])
        assert [r.hour for r in rows if r.is_active] == [7]
        assert not any(r.is_current for r in rows)

    def test_custom_default_hour(self, clock):
        controller = AgendaController(FakeStore(), clock=clock, timezone="UTC", default_hour=9)
        assert controller.active_slot(date(2024, 3, 10)).active_hour == 9


class TestAgenda:
    def test_loads_from_store(self, clock):
        standup = ScheduledItem(body="standup", start=datetime(2024, 3, 15, 9, 15), kind="event")
        store = FakeStore([standup, ScheduledItem(body="idea", kind="note")])
        controller = AgendaController(store, clock=clock, timezone="UTC")

        rows = controller.agenda(date(2024, 3, 15), kind="event")

        assert store.fetched_kinds == ["event"]
        assert rows[9].quarter_slots[1].item.body == "standup"


class TestNavigate:
    def test_month_backward(self, controller):
        assert controller.navigate(date(2024, 3, 15), "Month", "back").date() == date(2024, 2, 1)

    def test_week_start_from_controller(self, clock):
        controller = AgendaController(FakeStore(), clock=clock, timezone="UTC", week_start=MONDAY)
        assert controller.navigate(date(2024, 3, 15), "Week", "forward").date() == date(2024, 3, 18)

    def test_invalid_unit(self, controller):
        with pytest.raises(InvalidRangeUnit):
            controller.navigate(date(2024, 3, 15), "Eon", "forward")

    def test_window(self, controller):
        start, end = controller.window(date(2024, 3, 15), "Week")
        assert (start.date(), end.date()) == (date(2024, 3, 10), date(2024, 3, 17))

    def test_today(self, controller):
        result = controller.today()
        assert result.date() == date(2024, 3, 15)
        assert result.hour == 0


class TestOnCommit:
    def test_saves_edited_placeholder_as_real_note(self, clock):
        store = FakeStore()
        controller = AgendaController(store, clock=clock, timezone="UTC")
        rows = controller.render(date(2024, 3, 15), [])
        edited = rows[9].quarter_slots[1].item
        edited.body = "standup"

        saved = asyncio.run(controller.on_commit(edited))

        assert saved.id == "new-id"
        assert store.saved[0].placeholder is False
        assert (store.saved[0].start.hour, store.saved[0].start.minute) == (9, 15)

    def test_failure_propagates(self, clock):
        controller = AgendaController(FakeStore(fail=True), clock=clock, timezone="UTC")
        with pytest.raises(RuntimeError, match="store unavailable"):
            asyncio.run(controller.on_commit(ScheduledItem(body="x")))


def test_from_config(clock):
    config = Config(timezone="Europe/Berlin", week_start=MONDAY, default_active_hour=8, label_format="%H.%M")
    controller = AgendaController.from_config(config, FakeStore(), clock)
    assert controller.timezone == "Europe/Berlin"
    assert controller.week_start == MONDAY
    assert controller.default_hour == 8
    assert controller.render(date(2024, 3, 15), [])[9].label == "09.00"
