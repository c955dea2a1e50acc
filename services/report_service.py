"""
services/report_service.py
--------------------------
Spending reports: this month's expenses by category with shares, and
day-by-day totals for the last 7 days with the average per spending day.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from models.profile import Snapshot
from repositories.snapshot_repo import SnapshotRepository
from services.transaction_service import is_transfer
from utils.clock import Clock, SystemClock
from utils.dates import month_key
from utils.errors import ProfileNotFoundError
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)

WEEK_DAYS = 7


@dataclass(frozen=True)
class CategoryShare:
    category: str
    amount: float
    percent: float


@dataclass(frozen=True)
class SpendingReport:
    month: str
    month_total: float
    categories: list[CategoryShare]
    daily: list[tuple[date, float]]
    average_daily: float

    @property
    def is_empty(self) -> bool:
        return self.month_total == 0 and not any(amount for _, amount in self.daily)


def build_report(snapshot: Snapshot, today: date, days: int = WEEK_DAYS) -> SpendingReport:
    """
    Expenses (transfers excluded, both wallets) grouped two ways.

    The average divides the last `days` days' total by the number of
    those days that had any spending, so idle days do not dilute it.
    """
    expenses = [x for x in snapshot.transactions if x.is_expense() and not is_transfer(x)]

    current = month_key(today)
    totals: dict[str, float] = {}
    for x in expenses:
        if month_key(x.day) == current:
            totals[x.category] = totals.get(x.category, 0) + x.amount
    month_total = sum(totals.values())
    categories = [
        CategoryShare(category, amount, amount / month_total * 100 if month_total > 0 else 0)
        for category, amount in sorted(totals.items(), key=lambda item: -item[1])
    ]

    start = today - timedelta(days=days - 1)
    per_day = {start + timedelta(days=i): 0.0 for i in range(days)}
    for x in expenses:
        if x.day in per_day:
            per_day[x.day] += x.amount
    daily = sorted(per_day.items())
    active_days = sum(1 for _, amount in daily if amount > 0)
    average = sum(amount for _, amount in daily) / (active_days or 1)

    return SpendingReport(
        month=current,
        month_total=month_total,
        categories=categories,
        daily=daily,
        average_daily=average,
    )


class ReportService:
    """Builds the /report summary for a user."""

    def __init__(self, repo: Optional[SnapshotRepository] = None, clock: Optional[Clock] = None):
        self.repo = repo or SnapshotRepository()
        self.clock = clock or SystemClock()

    def get_report(self, user_id: int) -> SpendingReport:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        return build_report(snapshot, self.clock.today())

    def format_report(self, user_id: int) -> str:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        report = build_report(snapshot, self.clock.today())
        return format_report(report, snapshot.profile.language, snapshot.profile.currency)


def format_report(report: SpendingReport, language: str, currency: str) -> str:
    if report.is_empty:
        return t(language, "report_empty")

    lines = [t(language, "report_month", month=report.month,
               total=money(report.month_total), currency=currency)]
    for share in report.categories:
        lines.append(t(language, "report_category_line", category=share.category,
                       amount=money(share.amount), percent=round(share.percent)))

    lines.append("")
    lines.append(t(language, "report_week", start=report.daily[0][0].isoformat(),
                   end=report.daily[-1][0].isoformat()))
    for day, amount in report.daily:
        lines.append(t(language, "report_day_line", day=day.isoformat(), amount=money(amount)))
    lines.append(t(language, "report_average", amount=money(round(report.average_daily)),
                   currency=currency))
    return "\n".join(lines)
