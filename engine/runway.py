"""
engine/runway.py
----------------
Recent burn rate and the projected number of days until the spending wallet is empty.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from models.transaction import Transaction, Wallet

DEFAULT_WINDOW_DAYS = 10
LOW_FUNDS_THRESHOLD_DAYS = 10


@dataclass(frozen=True)
class BurnRate:
    daily_burn: float
    days_to_zero: float


def recent_spending(
    transactions: Iterable[Transaction],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> float:
    """Sum spending-wallet expenses dated within the trailing `window_days` days."""
    cutoff = now - timedelta(days=window_days)
    return sum(
        (
            t.amount
            for t in transactions
            if t.is_expense() and t.wallet == Wallet.SPENDING and t.date >= cutoff
        ),
        0.0,
    )


def compute_burn_rate(
    transactions: Iterable[Transaction],
    spending_balance: float,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> Optional[BurnRate]:
    """
    Average daily spending over the trailing window and the resulting runway.

    Returns None when nothing was spent in the window, since no projection
    can be made.

    Raises:
        ValueError: If `window_days` is not positive.
    """
    if window_days <= 0:
        raise ValueError(f"window_days must be positive, got {window_days}")

    daily_burn = recent_spending(transactions, now, window_days) / window_days
    if daily_burn == 0:
        return None
    return BurnRate(daily_burn=daily_burn, days_to_zero=spending_balance / daily_burn)


def should_warn_low_funds(
    burn: Optional[BurnRate],
    days_until_salary: int,
    threshold_days: int = LOW_FUNDS_THRESHOLD_DAYS,
) -> bool:
    """Warn when money runs out within `threshold_days` and before payday."""
    if burn is None:
        return False
    return burn.days_to_zero < threshold_days and burn.days_to_zero < days_until_salary
