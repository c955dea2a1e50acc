"""
services/dashboard_service.py
-----------------------------
Dashboard metrics: balances, this month's cash flow, today's spending
against the selected daily limit, and the runway / low-funds signal.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from config import BURN_WINDOW_DAYS, LOW_FUNDS_THRESHOLD_DAYS
from engine.calendar import WeekendConvention, compute_calendar_window
from engine.runway import BurnRate, compute_burn_rate, should_warn_low_funds
from models.profile import Snapshot
from repositories.snapshot_repo import SnapshotRepository
from services.transaction_service import is_transfer, spent_on
from utils.clock import Clock, SystemClock
from utils.dates import month_key
from utils.errors import MasareefyError, ProfileNotFoundError
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DashboardMetrics:
    spending_balance: float
    savings_balance: float
    month_income: float
    month_expense: float
    today_spent: float
    daily_limit: float
    progress_percent: float
    is_over_budget: bool
    days_until_salary: int
    next_salary_date: date
    burn: Optional[BurnRate]
    low_funds_warning: bool


def compute_dashboard(
    snapshot: Snapshot,
    now: datetime,
    window_days: int = BURN_WINDOW_DAYS,
    threshold_days: int = LOW_FUNDS_THRESHOLD_DAYS,
) -> DashboardMetrics:
    profile = snapshot.profile
    today = now.date()
    current_month = month_key(today)

    # Transfers between wallets are neither income nor spending.
    month_txs = [
        x for x in snapshot.transactions
        if month_key(x.day) == current_month and not is_transfer(x)
    ]
    month_income = sum(x.amount for x in month_txs if x.is_income())
    month_expense = sum(x.amount for x in month_txs if x.is_expense())

    today_spent = spent_on(snapshot.transactions, today)
    daily_limit = profile.daily_limit or 0
    progress = min(today_spent / daily_limit * 100, 100) if daily_limit > 0 else 0

    window = compute_calendar_window(
        today,
        profile.next_salary_date,
        profile.salary_interval,
        WeekendConvention.for_language(profile.language),
    )
    burn = compute_burn_rate(snapshot.transactions, profile.current_balance, now, window_days)

    return DashboardMetrics(
        spending_balance=profile.current_balance,
        savings_balance=profile.savings_balance,
        month_income=month_income,
        month_expense=month_expense,
        today_spent=today_spent,
        daily_limit=daily_limit,
        progress_percent=progress,
        is_over_budget=today_spent > daily_limit,
        days_until_salary=window.days_remaining,
        next_salary_date=window.next_salary_date,
        burn=burn,
        low_funds_warning=should_warn_low_funds(burn, window.days_remaining, threshold_days),
    )


class DashboardService:
    """Builds the dashboard and the daily low-funds alerts."""

    def __init__(self, repo: Optional[SnapshotRepository] = None, clock: Optional[Clock] = None):
        self.repo = repo or SnapshotRepository()
        self.clock = clock or SystemClock()

    def get_metrics(self, user_id: int) -> DashboardMetrics:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        return compute_dashboard(snapshot, self.clock.now())

    def format_dashboard(self, user_id: int) -> str:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        metrics = compute_dashboard(snapshot, self.clock.now())
        return format_dashboard(metrics, snapshot.profile.language, snapshot.profile.currency)

    def low_funds_alerts(self) -> list[tuple[int, str]]:
        """
        Messages for every stored user whose money is projected to run out
        before payday. Called once a day by the scheduler.
        """
        alerts = []
        now = self.clock.now()
        for user_id in self.repo.list_user_ids():
            try:
                snapshot = self.repo.load(user_id)
            except MasareefyError as e:
                logger.error(f"Skipping low-funds check for user {user_id}: {e}")
                continue
            if snapshot is None:
                continue

            metrics = compute_dashboard(snapshot, now)
            if metrics.low_funds_warning:
                alerts.append((user_id, format_low_funds(metrics, snapshot.profile.language)))
        logger.info(f"Low-funds check: {len(alerts)} alert(s)")
        return alerts


def format_low_funds(metrics: DashboardMetrics, language: str) -> str:
    return t(
        language,
        "low_funds",
        burn=money(round(metrics.burn.daily_burn)),
        days=round(metrics.burn.days_to_zero),
    )


def format_dashboard(metrics: DashboardMetrics, language: str, currency: str) -> str:
    lines = [
        t(
            language,
            "dashboard",
            balance=money(metrics.spending_balance),
            savings=money(metrics.savings_balance),
            currency=currency,
            income=money(metrics.month_income),
            expense=money(metrics.month_expense),
            days=metrics.days_until_salary,
            next_salary=metrics.next_salary_date.isoformat(),
        )
    ]
    if metrics.daily_limit > 0:
        lines.append(t(
            language,
            "dashboard_daily",
            icon="🔴" if metrics.is_over_budget else "🟢",
            spent=money(metrics.today_spent),
            limit=money(metrics.daily_limit),
            percent=round(metrics.progress_percent),
        ))
    if metrics.burn is not None:
        lines.append(t(
            language,
            "dashboard_burn",
            burn=money(round(metrics.burn.daily_burn)),
            days=round(metrics.burn.days_to_zero),
        ))
    if metrics.low_funds_warning:
        lines.append(format_low_funds(metrics, language))
    return "\n".join(lines)
