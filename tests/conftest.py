"""Shared pytest configuration for the project test suite."""
from __future__ import annotations

import sys
from datetime import date, datetime
from pathlib import Path
from types import SimpleNamespace
from typing import Optional

import pytest

# Ensure the repository root (which holds the layer packages) is importable.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.bill import RecurringBill  # noqa: E402
from models.plan import PlanType  # noqa: E402
from models.profile import Snapshot, UserProfile  # noqa: E402
from models.transaction import Transaction, TransactionType, Wallet  # noqa: E402
from utils.clock import FixedClock  # noqa: E402

USER_ID = 42


class InMemorySnapshotRepository:
    """Stands in for SnapshotRepository without a database."""

    def __init__(self, *snapshots: Snapshot):
        self.rows: dict[int, Snapshot] = {s.user_id: s for s in snapshots}
        self.saves = 0

    def load(self, user_id: int) -> Optional[Snapshot]:
        return self.rows.get(user_id)

    def list_user_ids(self) -> list[int]:
        return sorted(self.rows)

    def save(self, snapshot: Snapshot) -> None:
        self.rows[snapshot.user_id] = snapshot
        self.saves += 1

    def save_selected_plan(self, user_id: int, plan_type: PlanType, daily_limit: float) -> bool:
        snapshot = self.rows.get(user_id)
        if snapshot is None:
            return False
        profile = snapshot.profile.with_changes(selected_plan=plan_type, daily_limit=daily_limit)
        self.rows[user_id] = snapshot.with_profile(profile)
        return True

    def delete(self, user_id: int) -> bool:
        return self.rows.pop(user_id, None) is not None


def make_profile(**overrides) -> UserProfile:
    values = dict(
        user_id=USER_ID,
        name="Sara",
        language="en",
        currency="SAR",
        current_balance=1000.0,
        savings_balance=0.0,
        salary_interval=30,
        next_salary_date=date(2024, 1, 11),
    )
    values.update(overrides)
    return UserProfile(**values)


def make_tx(amount: float, when, tx_type=TransactionType.EXPENSE, wallet=Wallet.SPENDING,
            category: str = "food", tx_id: Optional[str] = None) -> Transaction:
    if isinstance(when, date) and not isinstance(when, datetime):
        when = datetime(when.year, when.month, when.day)
    return Transaction(
        id=tx_id or f"tx{amount:g}{when:%m%d%H}",
        amount=amount,
        date=when,
        category=category,
        type=tx_type,
        wallet=wallet,
    )


def make_bill(bill_id: str, amount: float, paid: Optional[date] = None, name: str = "") -> RecurringBill:
    return RecurringBill(id=bill_id, name=name or bill_id, amount=amount, last_paid_date=paid)


@pytest.fixture
def clock():
    # Monday
    return FixedClock(datetime(2024, 1, 1, 10, 0))


@pytest.fixture
def repo():
    return InMemorySnapshotRepository()


@pytest.fixture
def stub_update():
    """Factory for minimal Telegram Update stand-ins that record replies."""

    def _make(user_id: int = USER_ID, text: str = "", language_code: str = "en"):
        replies: list[str] = []

        async def reply_text(msg, **kwargs):
            replies.append(msg)

        async def reply_document(**kwargs):
            replies.append(kwargs.get("filename", ""))

        user = SimpleNamespace(id=user_id, username="tester", first_name="Sara",
                               language_code=language_code)
        message = SimpleNamespace(text=text, reply_text=reply_text, reply_document=reply_document)
        return SimpleNamespace(effective_user=user, message=message, replies=replies)

    return _make
