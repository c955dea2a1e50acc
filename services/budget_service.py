"""
services/budget_service.py
---------------------------
Business logic for budget plans: runs the engine over a user's snapshot,
formats the offered plans and persists the user's choice.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from engine.calendar import CalendarWindow, WeekendConvention, compute_calendar_window
from engine.liabilities import Disposable, compute_disposable, compute_unpaid_bills
from engine.plans import generate_plans
from models.plan import BudgetPlan, PlanType
from models.profile import Snapshot
from repositories.snapshot_repo import SnapshotRepository
from utils.clock import Clock, SystemClock
from utils.dates import month_key
from utils.errors import PlanUnavailableError, ProfileNotFoundError
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlanReport:
    """Everything the plan screen shows for one user on one day."""
    today: date
    window: CalendarWindow
    disposable: Disposable
    today_is_weekend: bool
    plans: list[BudgetPlan]

    def find(self, plan_type: PlanType) -> Optional[BudgetPlan]:
        return next((p for p in self.plans if p.type == plan_type), None)


def build_plan_report(snapshot: Snapshot, today: date) -> PlanReport:
    """Run calendar, liabilities and plan generation for one snapshot."""
    profile = snapshot.profile
    convention = WeekendConvention.for_language(profile.language)

    window = compute_calendar_window(
        today,
        profile.next_salary_date,
        profile.salary_interval,
        convention,
    )
    unpaid = compute_unpaid_bills(profile.recurring_bills, month_key(today))
    disposable = compute_disposable(profile.current_balance, unpaid)
    today_is_weekend = convention.is_weekend(today)

    return PlanReport(
        today=today,
        window=window,
        disposable=disposable,
        today_is_weekend=today_is_weekend,
        plans=generate_plans(disposable, window, today_is_weekend),
    )


class BudgetService:
    """
    Offers budget plans and records the user's selection.

    Only `{selectedPlan, dailyLimit}` is ever written back; the plans
    themselves are recomputed from the snapshot on every request.
    """

    def __init__(self, repo: Optional[SnapshotRepository] = None, clock: Optional[Clock] = None):
        self.repo = repo or SnapshotRepository()
        self.clock = clock or SystemClock()

    def load_snapshot(self, user_id: int) -> Snapshot:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        return snapshot

    def get_report(self, user_id: int) -> PlanReport:
        return build_plan_report(self.load_snapshot(user_id), self.clock.today())

    def select_plan(self, user_id: int, plan_type: PlanType) -> BudgetPlan:
        """
        Persist the chosen plan.

        Raises:
            ProfileNotFoundError: If the user has no snapshot.
            PlanUnavailableError: If the plan is not offered right now
                (only austerity is offered during a critical deficit).
        """
        report = self.get_report(user_id)
        plan = report.find(plan_type)
        if plan is None:
            logger.warning(f"User {user_id} requested unavailable plan '{plan_type.value}'")
            raise PlanUnavailableError(plan_type.value)

        self.repo.save_selected_plan(user_id, plan.type, plan.daily_limit)
        return plan

    def format_report(self, user_id: int) -> str:
        snapshot = self.load_snapshot(user_id)
        report = build_plan_report(snapshot, self.clock.today())
        return format_plan_report(report, snapshot)


def format_plan_report(report: PlanReport, snapshot: Snapshot) -> str:
    profile = snapshot.profile
    lang = profile.language
    lines = [
        t(
            lang,
            "plans_header",
            days=report.window.days_remaining,
            weekdays=report.window.weekday_count,
            weekends=report.window.weekend_count,
            disposable=money(report.disposable.net_disposable),
            currency=profile.currency,
            bills=money(report.disposable.unpaid_bills),
        )
    ]
    if report.disposable.is_critical:
        lines.append(t(lang, "plans_critical"))

    for plan in report.plans:
        marker = "✅" if profile.selected_plan == plan.type else "▫️"
        block = t(
            lang,
            "plan_line",
            marker=marker,
            title=plan.title(lang),
            limit=money(plan.daily_limit),
            currency=profile.currency,
            description=plan.description(lang),
        )
        if plan.monthly_savings_projected > 0:
            block += "\n" + t(lang, "plan_savings", amount=money(round(plan.monthly_savings_projected)))
        lines.append(block)

    lines.append(t(lang, "plans_footer"))
    return "\n\n".join(lines)
