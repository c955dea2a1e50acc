"""
models/bill.py
--------------
Domain model for fixed monthly bills (rent, internet, subscriptions).
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from utils.dates import month_key, parse_optional_date


@dataclass(frozen=True)
class RecurringBill:
    """
    A fixed charge due once per calendar month.

    Attributes:
        id: Opaque unique identifier.
        name: Display label (e.g. 'Rent', 'Internet').
        amount: Monthly charge in the user's currency.
        last_paid_date: Date of the most recent payment, if any.
    """
    id: str
    name: str
    amount: float
    last_paid_date: Optional[date] = None

    def is_paid_in(self, current_month_key: str) -> bool:
        """True iff the last payment falls in the given YYYY-MM month."""
        if self.last_paid_date is None:
            return False
        return month_key(self.last_paid_date) == current_month_key

    def mark_paid(self, paid_on: date) -> "RecurringBill":
        return replace(self, last_paid_date=paid_on)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "lastPaidDate": self.last_paid_date.isoformat() if self.last_paid_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RecurringBill":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            amount=float(data.get("amount", 0)),
            last_paid_date=parse_optional_date(data.get("lastPaidDate"), "lastPaidDate"),
        )

    def __str__(self) -> str:
        return f"{self.name}: {self.amount:.2f}"
