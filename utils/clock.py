"""
utils/clock.py
--------------
Injectable source of "now".
Services read the wall clock only through a Clock so that every
calculation can be replayed with a fixed date.
"""

from datetime import date, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    """Local wall-clock time of the host."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return date.today()


class FixedClock:
    """A clock frozen at a given moment."""

    def __init__(self, moment: datetime):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def today(self) -> date:
        return self._moment.date()

    def advance(self, **delta) -> None:
        self._moment = self._moment + timedelta(**delta)
