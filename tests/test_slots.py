"""Tests for the slot grid."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from daybook.core.slots import (
    hour_buckets,
    quarter_offsets,
    slot_timestamp,
    to_local,
    truncate_to_minute,
)


class TestGrid:
    def test_24_hour_buckets_in_order(self):
        assert hour_buckets() == list(range(24))

    def test_quarter_offsets(self):
        assert quarter_offsets() == [0, 15, 30, 45]

    def test_returns_fresh_lists(self):
        hour_buckets().append(24)
        assert len(hour_buckets()) == 24


class TestSlotTimestamp:
    def test_from_date(self):
        assert slot_timestamp(date(2024, 3, 15), 9, 15) == datetime(2024, 3, 15, 9, 15)

    def test_uses_calendar_date_and_zeroes_seconds(self):
        ref = datetime(2024, 3, 15, 13, 47, 12, 500)
        ts = slot_timestamp(ref, 0, 45)
        assert ts == datetime(2024, 3, 15, 0, 45)
        assert ts.second == 0 and ts.microsecond == 0

    def test_keeps_reference_timezone(self):
        tz = ZoneInfo("America/Toronto")
        ts = slot_timestamp(datetime(2024, 3, 15, tzinfo=tz), 23, 30)
        assert ts.tzinfo is tz
        assert (ts.hour, ts.minute) == (23, 30)


class TestToLocal:
    def test_aware_value_converted_to_anchor_zone(self):
        anchor = datetime(2024, 3, 15, tzinfo=ZoneInfo("America/Toronto"))
        value = datetime(2024, 3, 15, 13, 15, tzinfo=timezone.utc)
        assert to_local(value, anchor).hour == 9

    def test_naive_value_taken_as_anchor_wall_time(self):
        tz = ZoneInfo("Europe/Berlin")
        local = to_local(datetime(2024, 3, 15, 9, 15), datetime(2024, 3, 15, tzinfo=tz))
        assert local.tzinfo is tz
        assert local.hour == 9

    def test_naive_anchor_keeps_wall_time(self):
        value = datetime(2024, 3, 15, 9, 15, tzinfo=timezone.utc)
        local = to_local(value, date(2024, 3, 15))
        assert local == datetime(2024, 3, 15, 9, 15)


def test_truncate_to_minute():
    assert truncate_to_minute(datetime(2024, 3, 15, 9, 15, 42, 99)) == datetime(2024, 3, 15, 9, 15)
