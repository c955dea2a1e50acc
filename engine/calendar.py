"""
engine/calendar.py
------------------
Days left until the next salary, split into weekdays and weekend days.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Optional

DEFAULT_SALARY_INTERVAL_DAYS = 30


class WeekendConvention(Enum):
    """Weekend days as `date.weekday()` numbers (Monday == 0)."""
    FRIDAY_SATURDAY = (4, 5)
    SATURDAY_SUNDAY = (5, 6)

    @classmethod
    def for_language(cls, language: str) -> "WeekendConvention":
        """Arabic-locale users rest Friday/Saturday; everyone else Saturday/Sunday."""
        if language == "ar":
            return cls.FRIDAY_SATURDAY
        return cls.SATURDAY_SUNDAY

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.value


@dataclass(frozen=True)
class CalendarWindow:
    next_salary_date: date
    days_remaining: int
    weekday_count: int
    weekend_count: int


def resolve_next_salary(
    today: date,
    next_salary_date: Optional[date],
    salary_interval_days: Optional[int] = None,
) -> date:
    """
    Return `next_salary_date` if it is still in the future, otherwise
    synthesize one as today + interval (30 days when unspecified).
    """
    if next_salary_date is not None and next_salary_date > today:
        return next_salary_date
    interval = salary_interval_days or DEFAULT_SALARY_INTERVAL_DAYS
    return today + timedelta(days=interval)


def compute_calendar_window(
    today: date,
    next_salary_date: Optional[date],
    salary_interval_days: Optional[int],
    weekend_convention: WeekendConvention,
) -> CalendarWindow:
    """
    Count the days from `today` (inclusive) up to the next salary (exclusive).

    At least one day is always returned, so a payday-today or a negative
    interval still yields a one-day budget window.
    """
    payday = resolve_next_salary(today, next_salary_date, salary_interval_days)
    days_remaining = max(1, math.ceil((payday - today).days))

    weekend_count = 0
    for offset in range(days_remaining):
        if weekend_convention.is_weekend(today + timedelta(days=offset)):
            weekend_count += 1

    return CalendarWindow(
        next_salary_date=payday,
        days_remaining=days_remaining,
        weekday_count=days_remaining - weekend_count,
        weekend_count=weekend_count,
    )
