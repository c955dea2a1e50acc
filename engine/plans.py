"""
engine/plans.py
---------------
Daily spending allowances under the three budget postures.

Every per-day figure is floored to whole currency units. Order matters:
the safety buffer is taken before the savings share, and on weekend days
the multiplier is applied to the already-floored base allowance.
"""

import math

from engine.calendar import CalendarWindow
from engine.liabilities import Disposable
from models.plan import PLAN_DESCRIPTIONS, PLAN_POLICIES, BudgetPlan, PlanType


def generate_plan(
    plan_type: PlanType,
    net_disposable: float,
    gross_balance: float,
    unpaid_bills_total: float,
    weekday_count: int,
    weekend_count: int,
    today_is_weekend: bool,
) -> BudgetPlan:
    """Build the plan for one posture."""
    policy = PLAN_POLICIES[plan_type]

    after_buffer = net_disposable * (1 - policy.buffer_pct)
    spendable_pool = after_buffer * (1 - policy.savings_pct)
    # The second term is zero unless the disposable clamp kicked in.
    projected_savings = (
        (net_disposable - spendable_pool)
        + (gross_balance - net_disposable - unpaid_bills_total)
    )

    weighted_divisor = max(1, weekday_count + weekend_count * policy.weekend_multiplier)
    base_daily = math.floor(spendable_pool / weighted_divisor)
    if today_is_weekend:
        today_limit = math.floor(base_daily * policy.weekend_multiplier)
    else:
        today_limit = base_daily

    return BudgetPlan(
        type=plan_type,
        daily_limit=max(0, today_limit),
        monthly_savings_projected=projected_savings,
        descriptions=dict(PLAN_DESCRIPTIONS[plan_type]),
    )


def generate_plans(
    disposable: Disposable,
    window: CalendarWindow,
    today_is_weekend: bool,
) -> list[BudgetPlan]:
    """
    Offer austerity, balanced and comfort plans in that order, or only
    austerity while the balance cannot cover unpaid bills.
    """
    if disposable.is_critical:
        offered = [PlanType.AUSTERITY]
    else:
        offered = [PlanType.AUSTERITY, PlanType.BALANCED, PlanType.COMFORT]

    return [
        generate_plan(
            plan_type,
            net_disposable=disposable.net_disposable,
            gross_balance=disposable.gross_balance,
            unpaid_bills_total=disposable.unpaid_bills,
            weekday_count=window.weekday_count,
            weekend_count=window.weekend_count,
            today_is_weekend=today_is_weekend,
        )
        for plan_type in offered
    ]
