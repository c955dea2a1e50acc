"""
engine/liabilities.py
---------------------
Unpaid fixed bills for the current month and the disposable income left after them.
"""

from dataclasses import dataclass
from typing import Iterable

from models.bill import RecurringBill


def compute_unpaid_bills(bills: Iterable[RecurringBill], current_month_key: str) -> float:
    """Sum every bill not paid within `current_month_key` (YYYY-MM)."""
    return sum((b.amount for b in bills if not b.is_paid_in(current_month_key)), 0.0)


@dataclass(frozen=True)
class Disposable:
    gross_balance: float
    unpaid_bills: float
    net_disposable: float
    is_critical: bool


def compute_disposable(gross_balance: float, unpaid_bills_total: float) -> Disposable:
    """
    Net spendable funds after unpaid bills.

    A negative stored balance counts as zero funds. The result is critical
    when the (clamped) balance cannot cover the bills on its own.
    """
    gross = max(0.0, gross_balance)
    return Disposable(
        gross_balance=gross,
        unpaid_bills=unpaid_bills_total,
        net_disposable=max(0.0, gross - unpaid_bills_total),
        is_critical=gross < unpaid_bills_total,
    )
