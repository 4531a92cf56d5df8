"""Tests for weekday mapping and the 7-day window."""

from datetime import date, datetime, timedelta

import pytest

from mealgrid.days import (
    TIMESLOT_LABELS,
    WEEKDAY_LABELS,
    format_availability_slot,
    get_next_7_days,
    get_time_slot_label,
    get_weekday_label,
    map_js_day_to_weekday_enum,
    map_weekday_enum_to_ja,
)


class TestMapJsDayToWeekdayEnum:
    def test_sunday_first_numbering(self):
        assert map_js_day_to_weekday_enum(0) == "SUN"
        assert map_js_day_to_weekday_enum(1) == "MON"
        assert map_js_day_to_weekday_enum(6) == "SAT"

    def test_out_of_range_falls_back_to_sunday(self):
        assert map_js_day_to_weekday_enum(9) == "SUN"
        assert map_js_day_to_weekday_enum(-1) == "SUN"


class TestLabels:
    def test_weekday_labels(self):
        assert map_weekday_enum_to_ja("MON") == "月"
        assert get_weekday_label("SUN") == "日"

    def test_time_slot_labels(self):
        assert get_time_slot_label("DAY") == "昼"
        assert get_time_slot_label("NIGHT") == "夜"

    def test_unknown_values_echo(self):
        assert map_weekday_enum_to_ja("XXX") == "XXX"
        assert get_time_slot_label("BRUNCH") == "BRUNCH"

    def test_label_tables_are_read_only(self):
        with pytest.raises(TypeError):
            WEEKDAY_LABELS["MON"] = "Mon"
        with pytest.raises(TypeError):
            TIMESLOT_LABELS["DAY"] = "Day"

    def test_format_availability_slot(self):
        assert format_availability_slot("FRI", "NIGHT") == "金 夜"


class TestGetNext7Days:
    def test_window_from_fixed_clock(self):
        # 2026-10-19 is a Monday
        days = get_next_7_days(clock=lambda: datetime(2026, 10, 19, 23, 59))
        assert len(days) == 7
        assert days[0].date == date(2026, 10, 19)
        assert days[6].date == date(2026, 10, 25)
        assert [d.weekday for d in days] == ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]
        assert days[0].day_label == "19"
        assert days[0].weekday_label == "月"

    def test_window_crosses_month(self):
        days = get_next_7_days(clock=lambda: date(2026, 2, 26))
        assert [d.day_label for d in days] == ["26", "27", "28", "1", "2", "3", "4"]
        assert days[0].weekday == "THU"
        assert days[3].weekday == "SUN"

    def test_consecutive_days(self):
        days = get_next_7_days(clock=lambda: date(2026, 12, 29))
        for earlier, later in zip(days, days[1:]):
            assert later.date - earlier.date == timedelta(days=1)

    def test_default_clock_starts_today(self):
        before = date.today()
        days = get_next_7_days()
        after = date.today()
        assert days[0].date in (before, after)
        assert len(days) == 7
        assert days[6].date - days[0].date == timedelta(days=6)
