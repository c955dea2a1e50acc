"""
models/profile.py
-----------------
The user's financial profile and the immutable snapshot handed to services.
Serialization mirrors the stored JSON blob (camelCase keys).
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from config import DEFAULT_CURRENCY, DEFAULT_LANGUAGE, DEFAULT_SALARY_INTERVAL_DAYS
from models.bill import RecurringBill
from models.plan import PlanType
from models.transaction import Transaction
from utils.dates import parse_optional_date


@dataclass(frozen=True)
class UserProfile:
    """
    Attributes:
        user_id: Telegram user ID.
        name: Display name.
        language: 'en' | 'ar' | 'ru'; also selects the weekend convention.
        currency: Display unit only.
        current_balance: Spending wallet balance, before bill deduction.
        savings_balance: Savings wallet balance.
        last_salary_date / last_salary_amount: Most recent salary deposit.
        salary_interval: Days between salaries.
        next_salary_date: Expected next salary, may be stale or missing.
        selected_plan / daily_limit: Persisted plan choice.
        recurring_bills: Fixed monthly bills.
    """
    user_id: int
    name: str = ""
    language: str = DEFAULT_LANGUAGE
    currency: str = DEFAULT_CURRENCY
    current_balance: float = 0.0
    savings_balance: float = 0.0
    last_salary_date: Optional[date] = None
    last_salary_amount: Optional[float] = None
    salary_interval: int = DEFAULT_SALARY_INTERVAL_DAYS
    next_salary_date: Optional[date] = None
    selected_plan: Optional[PlanType] = None
    daily_limit: Optional[float] = None
    recurring_bills: tuple[RecurringBill, ...] = ()

    def with_changes(self, **changes) -> "UserProfile":
        return replace(self, **changes)

    def find_bill(self, bill_id: str) -> Optional[RecurringBill]:
        return next((b for b in self.recurring_bills if b.id == bill_id), None)

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "name": self.name,
            "language": self.language,
            "currency": self.currency,
            "currentBalance": self.current_balance,
            "savingsBalance": self.savings_balance,
            "lastSalaryDate": self.last_salary_date.isoformat() if self.last_salary_date else None,
            "lastSalaryAmount": self.last_salary_amount,
            "salaryInterval": self.salary_interval,
            "nextSalaryDate": self.next_salary_date.isoformat() if self.next_salary_date else None,
            "selectedPlan": self.selected_plan.value if self.selected_plan else None,
            "dailyLimit": self.daily_limit,
            "recurringBills": [b.to_dict() for b in self.recurring_bills],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        selected = data.get("selectedPlan")
        salary_amount = data.get("lastSalaryAmount")
        daily_limit = data.get("dailyLimit")
        return cls(
            user_id=int(data["userId"]),
            name=data.get("name") or "",
            language=data.get("language") or DEFAULT_LANGUAGE,
            currency=data.get("currency") or DEFAULT_CURRENCY,
            current_balance=float(data.get("currentBalance") or 0),
            savings_balance=float(data.get("savingsBalance") or 0),
            last_salary_date=parse_optional_date(data.get("lastSalaryDate"), "lastSalaryDate"),
            last_salary_amount=float(salary_amount) if salary_amount is not None else None,
            salary_interval=int(data.get("salaryInterval") or DEFAULT_SALARY_INTERVAL_DAYS),
            next_salary_date=parse_optional_date(data.get("nextSalaryDate"), "nextSalaryDate"),
            selected_plan=PlanType(selected) if selected else None,
            daily_limit=float(daily_limit) if daily_limit is not None else None,
            recurring_bills=tuple(
                RecurringBill.from_dict(b) for b in data.get("recurringBills") or []
            ),
        )


@dataclass(frozen=True)
class Snapshot:
    """Everything the engine reads for one user, passed by value."""
    profile: UserProfile
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @property
    def user_id(self) -> int:
        return self.profile.user_id

    def with_profile(self, profile: UserProfile) -> "Snapshot":
        return replace(self, profile=profile)

    def with_transactions(self, transactions) -> "Snapshot":
        return replace(self, transactions=tuple(transactions))

    @classmethod
    def from_blob(cls, profile: dict, transactions: list) -> "Snapshot":
        return cls(
            profile=UserProfile.from_dict(profile),
            transactions=tuple(Transaction.from_dict(t) for t in transactions or []),
        )

    def to_blob(self) -> tuple[dict, list]:
        return self.profile.to_dict(), [t.to_dict() for t in self.transactions]
