"""Pure date-range navigation arithmetic - no I/O dependencies."""

from datetime import date, datetime, time
from enum import Enum

import pendulum

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)
DEFAULT_WEEK_START = SUNDAY

WEEKDAY_NAMES = {
    "monday": MONDAY,
    "tuesday": TUESDAY,
    "wednesday": WEDNESDAY,
    "thursday": THURSDAY,
    "friday": FRIDAY,
    "saturday": SATURDAY,
    "sunday": SUNDAY,
}


class InvalidRangeUnit(ValueError):
    """Raised when navigation is requested with an unknown range unit."""

    pass


class RangeUnit(Enum):
    """Granularity of the visible date window."""

    DAY = "Day"
    WEEK = "Week"
    FORTNIGHT = "Fortnight"
    MONTH = "Month"
    QUARTER = "Quarter"
    YEAR = "Year"

    @property
    def step_unit(self) -> str:
        """Calendar unit a navigation step is measured in."""
        return _STEP_UNITS[self]

    @property
    def step_amount(self) -> int:
        """Number of step units per navigation step."""
        return 2 if self is RangeUnit.FORTNIGHT else 1

    @property
    def shortcut(self) -> str:
        return self.value[0].lower()

    @classmethod
    def parse(cls, value: "RangeUnit | str") -> "RangeUnit":
        """
        Resolve a unit from a member, a name ("fortnight"), or a shortcut ("f").

        Raises InvalidRangeUnit for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for unit in cls:
                if key in (unit.value.lower(), unit.shortcut):
                    return unit
        raise InvalidRangeUnit(
            f"Unknown range unit {value!r}; expected one of {', '.join(u.value for u in cls)}"
        )


_STEP_UNITS = {
    RangeUnit.DAY: "day",
    RangeUnit.WEEK: "week",
    RangeUnit.FORTNIGHT: "week",
    RangeUnit.MONTH: "month",
    RangeUnit.QUARTER: "quarter",
    RangeUnit.YEAR: "year",
}


class Direction(Enum):
    BACKWARD = -1
    FORWARD = 1

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("back", "backward", "left", "prev", "previous"):
            return cls.BACKWARD
        if key in ("forward", "right", "next"):
            return cls.FORWARD
        raise ValueError(f"Unknown direction {value!r}")


def parse_weekday(value: str | int) -> int:
    """Weekday number (0=Monday .. 6=Sunday) from a name or number."""
    if isinstance(value, int):
        if 0 <= value <= 6:
            return value
        raise ValueError(f"Weekday must be within 0..6, got {value}")
    key = value.strip().lower()
    if key not in WEEKDAY_NAMES:
        raise ValueError(f"Unknown weekday {value!r}")
    return WEEKDAY_NAMES[key]


def as_datetime(value: date | datetime, tz: str = "local") -> pendulum.DateTime:
    """Pendulum DateTime for a date or datetime; naive values are read in `tz`."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is None:
        return pendulum.instance(value, tz=tz)
    return pendulum.instance(value)


def add_to_calendar(value: date | datetime, step_unit: str, delta: int, tz: str = "local") -> pendulum.DateTime:
    """Move `delta` calendar units; month-like units clamp to the month's last day."""
    dt = as_datetime(value, tz)
    match step_unit:
        case "day":
            return dt.add(days=delta)
        case "week":
            return dt.add(weeks=delta)
        case "month":
            return dt.add(months=delta)
        case "quarter":
            return dt.add(months=3 * delta)
        case "year":
            return dt.add(years=delta)
    raise InvalidRangeUnit(f"Unknown step unit {step_unit!r}")


def start_of_period(
    value: date | datetime,
    step_unit: str,
    week_start: int = DEFAULT_WEEK_START,
    tz: str = "local",
) -> pendulum.DateTime:
    """Snap to the first instant of the day/week/month/quarter/year containing `value`."""
    day = as_datetime(value, tz).start_of("day")
    match step_unit:
        case "day":
            return day
        case "week":
            return day.subtract(days=(day.weekday() - week_start) % 7)
        case "month":
            return day.start_of("month")
        case "quarter":
            return day.start_of("year").add(months=(day.month - 1) // 3 * 3)
        case "year":
            return day.start_of("year")
    raise InvalidRangeUnit(f"Unknown step unit {step_unit!r}")


def step(
    current_date: date | datetime,
    unit: RangeUnit | str,
    direction: Direction | str,
    week_start: int = DEFAULT_WEEK_START,
    tz: str = "local",
) -> pendulum.DateTime:
    """
    Navigation target one range step before or after `current_date`.

    The date is moved by the unit's step (two weeks for Fortnight) and then
    snapped to the start of that step unit's period.

    Raises:
        InvalidRangeUnit: `unit` is not a known range unit.
    """
    unit = RangeUnit.parse(unit)
    direction = Direction.parse(direction)

    delta = unit.step_amount * direction.value
    candidate = add_to_calendar(current_date, unit.step_unit, delta, tz)
    return start_of_period(candidate, unit.step_unit, week_start, tz)


def period_bounds(
    current_date: date | datetime,
    unit: RangeUnit | str,
    week_start: int = DEFAULT_WEEK_START,
    tz: str = "local",
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """Visible window [start, end) of the range containing `current_date`."""
    unit = RangeUnit.parse(unit)
    start = start_of_period(current_date, unit.step_unit, week_start, tz)
    end = add_to_calendar(start, unit.step_unit, unit.step_amount, tz)
    return start, end


def today(now: datetime, tz: str = "local") -> pendulum.DateTime:
    """Start of the day containing `now` (jump-to-today)."""
    return as_datetime(now, tz).start_of("day")
