"""Weekday labels and the rolling 7-day window."""

from collections.abc import Callable
from datetime import date, datetime, timedelta
from types import MappingProxyType

from mealgrid.grid import TIMESLOTS, WEEKDAYS
from mealgrid.models import Next7Day, Weekday

# Index is the native day-of-week number used by the client, 0 = Sunday
DAY_INDEX_TO_WEEKDAY: tuple[Weekday, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

WEEKDAY_LABELS: MappingProxyType[str, str] = MappingProxyType(dict(WEEKDAYS))
TIMESLOT_LABELS: MappingProxyType[str, str] = MappingProxyType(dict(TIMESLOTS))

WINDOW_DAYS = 7


def map_js_day_to_weekday_enum(day_index: int) -> Weekday:
    """Map a 0 = Sunday day-of-week index to a Weekday; out-of-range input maps to SUN."""
    if isinstance(day_index, int) and 0 <= day_index < len(DAY_INDEX_TO_WEEKDAY):
        return DAY_INDEX_TO_WEEKDAY[day_index]
    return "SUN"


def map_weekday_enum_to_ja(weekday: str) -> str:
    return WEEKDAY_LABELS.get(weekday, weekday)


def get_weekday_label(weekday: str) -> str:
    return map_weekday_enum_to_ja(weekday)


def get_time_slot_label(time_slot: str) -> str:
    return TIMESLOT_LABELS.get(time_slot, time_slot)


def format_availability_slot(weekday: str, time_slot: str) -> str:
    """Human-readable cell name, e.g. "月 昼"."""
    return f"{get_weekday_label(weekday)} {get_time_slot_label(time_slot)}"


def _to_date(value: date | datetime) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def get_next_7_days(clock: Callable[[], date | datetime] = datetime.now) -> list[Next7Day]:
    """
    Return today and the following 6 calendar days.

    ``clock`` supplies "now" and defaults to the local wall clock; its
    time of day is ignored. The result shifts when the date changes, so
    callers rendering one view should compute it once and reuse it.
    """
    today = _to_date(clock())
    days: list[Next7Day] = []
    for offset in range(WINDOW_DAYS):
        day = today + timedelta(days=offset)
        # isoweekday() is 1 = Monday .. 7 = Sunday
        weekday = map_js_day_to_weekday_enum(day.isoweekday() % 7)
        days.append(
            Next7Day(
                date=day,
                day_label=str(day.day),
                weekday_label=map_weekday_enum_to_ja(weekday),
                weekday=weekday,
            )
        )
    return days
