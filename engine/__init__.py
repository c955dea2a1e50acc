"""
engine/ - Budget Calculation Core
=================================
Pure, synchronous functions that turn a financial snapshot into daily
allowances and solvency signals. Nothing here reads the clock, touches
the database or logs; "today" and "now" are always passed in.
"""

from engine.calendar import CalendarWindow, WeekendConvention, compute_calendar_window
from engine.liabilities import Disposable, compute_disposable, compute_unpaid_bills
from engine.plans import generate_plan, generate_plans
from engine.runway import BurnRate, compute_burn_rate, should_warn_low_funds

__all__ = [
    "CalendarWindow",
    "WeekendConvention",
    "compute_calendar_window",
    "Disposable",
    "compute_disposable",
    "compute_unpaid_bills",
    "generate_plan",
    "generate_plans",
    "BurnRate",
    "compute_burn_rate",
    "should_warn_low_funds",
]
