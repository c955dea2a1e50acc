"""Tests for the salary calendar window."""

from datetime import date, timedelta

import pytest

from engine.calendar import WeekendConvention, compute_calendar_window, resolve_next_salary

MONDAY = date(2024, 1, 1)
EN = WeekendConvention.SATURDAY_SUNDAY
AR = WeekendConvention.FRIDAY_SATURDAY


class TestWeekendConvention:

    def test_language_selects_convention(self):
        assert WeekendConvention.for_language("ar") is AR
        assert WeekendConvention.for_language("en") is EN
        assert WeekendConvention.for_language("ru") is EN

    def test_friday_is_weekend_only_for_arabic(self):
        friday = date(2024, 1, 5)
        assert AR.is_weekend(friday)
        assert not EN.is_weekend(friday)

    def test_sunday_is_weekend_only_for_western(self):
        sunday = date(2024, 1, 7)
        assert EN.is_weekend(sunday)
        assert not AR.is_weekend(sunday)


class TestCalendarWindow:

    def test_ten_day_window_from_monday(self):
        window = compute_calendar_window(MONDAY, date(2024, 1, 11), 30, EN)
        assert window.days_remaining == 10
        assert window.weekday_count == 8
        assert window.weekend_count == 2

    def test_arabic_weekend_counts_friday_and_saturday(self):
        window = compute_calendar_window(MONDAY, date(2024, 1, 11), 30, AR)
        # Jan 5 (Fri) and Jan 6 (Sat)
        assert window.weekend_count == 2
        assert window.weekday_count == 8

    def test_missing_salary_date_uses_interval(self):
        window = compute_calendar_window(MONDAY, None, 30, EN)
        assert window.next_salary_date == date(2024, 1, 31)
        assert window.days_remaining == 30

    def test_missing_interval_defaults_to_thirty_days(self):
        window = compute_calendar_window(MONDAY, None, None, EN)
        assert window.next_salary_date == date(2024, 1, 31)

    @pytest.mark.parametrize("stale", [MONDAY, MONDAY - timedelta(days=3)])
    def test_stale_salary_date_is_replaced(self, stale):
        window = compute_calendar_window(MONDAY, stale, 14, EN)
        assert window.next_salary_date == date(2024, 1, 15)
        assert window.days_remaining == 14

    def test_payday_tomorrow_is_a_one_day_window(self):
        window = compute_calendar_window(MONDAY, MONDAY + timedelta(days=1), 30, EN)
        assert window.days_remaining == 1
        assert (window.weekday_count, window.weekend_count) == (1, 0)

    def test_negative_interval_still_yields_one_day(self):
        window = compute_calendar_window(MONDAY, None, -5, EN)
        assert window.days_remaining == 1

    def test_window_starting_on_weekend_counts_today(self):
        saturday = date(2024, 1, 6)
        window = compute_calendar_window(saturday, saturday + timedelta(days=2), 30, EN)
        assert window.weekend_count == 2
        assert window.weekday_count == 0

    def test_days_always_partition_into_weekdays_and_weekends(self):
        for start_offset in range(7):
            today = MONDAY + timedelta(days=start_offset)
            for length in (1, 2, 5, 13, 31, 45):
                for convention in (EN, AR):
                    window = compute_calendar_window(today, today + timedelta(days=length), 30, convention)
                    assert window.days_remaining == length
                    assert window.weekday_count + window.weekend_count == window.days_remaining

    def test_same_inputs_same_window(self):
        first = compute_calendar_window(MONDAY, date(2024, 1, 20), 30, AR)
        second = compute_calendar_window(MONDAY, date(2024, 1, 20), 30, AR)
        assert first == second


def test_resolve_keeps_future_salary_date():
    assert resolve_next_salary(MONDAY, date(2024, 2, 1), 30) == date(2024, 2, 1)
