"""
models/transaction.py
---------------------
Domain model for financial transactions (expenses and income).
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum

from utils.dates import parse_moment


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Wallet(str, Enum):
    SPENDING = "spending"
    SAVINGS = "savings"


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single financial transaction.

    Attributes:
        id: Opaque unique identifier.
        amount: Always non-negative; the sign comes from `type`.
        date: When it happened. Date-only entries are stored at midnight.
        category: Category tag (food, transport, utilities, transfer, ...).
        type: Income or expense.
        wallet: Which balance the transaction moves.
        vendor: Optional merchant / counterparty.
        note: Optional free text.
        is_recurring: True for fixed-bill payments.
    """
    id: str
    amount: float
    date: datetime
    category: str
    type: TransactionType
    wallet: Wallet = Wallet.SPENDING
    vendor: str = ""
    note: str = ""
    is_recurring: bool = False

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Transaction amount must be non-negative, got {self.amount}")

    @property
    def day(self) -> date:
        return self.date.date()

    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def signed_amount(self) -> float:
        return self.amount if self.is_income() else -self.amount

    def to_dict(self) -> dict:
        if self.date.time() == time.min:
            stamp = self.date.date().isoformat()
        else:
            stamp = self.date.isoformat()
        return {
            "id": self.id,
            "amount": self.amount,
            "date": stamp,
            "category": self.category,
            "type": self.type.value,
            "wallet": self.wallet.value,
            "vendor": self.vendor,
            "note": self.note,
            "isRecurring": self.is_recurring,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        # Records written before wallets existed belong to the spending wallet.
        return cls(
            id=str(data["id"]),
            amount=float(data["amount"]),
            date=parse_moment(data.get("date"), "date"),
            category=data.get("category") or "other",
            type=TransactionType(data["type"]),
            wallet=Wallet(data.get("wallet") or Wallet.SPENDING.value),
            vendor=data.get("vendor") or "",
            note=data.get("note") or "",
            is_recurring=bool(data.get("isRecurring", False)),
        )

    def __str__(self) -> str:
        sign = "-" if self.is_expense() else "+"
        return f"{sign}{self.amount:.2f} | {self.category} | {self.day}"
