"""
services/bill_service.py
------------------------
Business logic for fixed monthly bills: add, list, mark paid and delete.
"""

from datetime import date, datetime
from typing import Optional

from engine.liabilities import compute_unpaid_bills
from models.bill import RecurringBill
from models.profile import Snapshot
from models.transaction import Transaction, TransactionType, Wallet
from repositories.snapshot_repo import SnapshotRepository
from services.transaction_service import new_id, record_into
from utils.clock import Clock, SystemClock
from utils.dates import month_key
from utils.errors import BillNotFoundError, ProfileNotFoundError
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)


class BillService:
    """
    Handles all business logic for recurring bills.

    Responsibilities:
        - Keep the user's bill list.
        - Mark bills paid, optionally deducting the amount as an expense.
        - Report which bills are still due this month.
    """

    def __init__(self, repo: Optional[SnapshotRepository] = None, clock: Optional[Clock] = None):
        self.repo = repo or SnapshotRepository()
        self.clock = clock or SystemClock()

    def _load(self, user_id: int) -> Snapshot:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        return snapshot

    def add_bill(self, user_id: int, name: str, amount: float) -> RecurringBill:
        """
        Raises:
            ValueError: If `amount` is negative or `name` is empty.
        """
        if amount < 0:
            raise ValueError(f"Bill amount must be non-negative, got {amount}")
        if not name.strip():
            raise ValueError("Bill name must not be empty")

        snapshot = self._load(user_id)
        bill = RecurringBill(id=new_id(), name=name.strip(), amount=amount)
        profile = snapshot.profile.with_changes(
            recurring_bills=snapshot.profile.recurring_bills + (bill,)
        )
        self.repo.save(snapshot.with_profile(profile))
        logger.info(f"User {user_id} added bill '{bill.name}' #{bill.id}")
        return bill

    def pay_bill(
        self,
        user_id: int,
        bill_id: str,
        paid_on: Optional[date] = None,
        deduct: bool = True,
    ) -> RecurringBill:
        """
        Mark a bill paid on `paid_on` (default today).

        With `deduct`, the payment is also recorded as a spending-wallet
        expense so the balance goes down by the bill amount.

        Raises:
            BillNotFoundError: If no bill has that id.
        """
        snapshot = self._load(user_id)
        bill = snapshot.profile.find_bill(bill_id)
        if bill is None:
            raise BillNotFoundError(bill_id)

        paid_on = paid_on or self.clock.today()
        paid = bill.mark_paid(paid_on)
        bills = tuple(paid if b.id == bill_id else b for b in snapshot.profile.recurring_bills)
        snapshot = snapshot.with_profile(snapshot.profile.with_changes(recurring_bills=bills))

        if deduct:
            payment = Transaction(
                id=new_id(),
                amount=bill.amount,
                date=datetime(paid_on.year, paid_on.month, paid_on.day),
                category="utilities",
                type=TransactionType.EXPENSE,
                wallet=Wallet.SPENDING,
                vendor=bill.name,
                note="Fixed Bill",
                is_recurring=True,
            )
            snapshot = record_into(snapshot, payment)

        self.repo.save(snapshot)
        logger.info(f"User {user_id} paid bill #{bill_id} on {paid_on} (deduct={deduct})")
        return paid

    def delete_bill(self, user_id: int, bill_id: str) -> RecurringBill:
        snapshot = self._load(user_id)
        bill = snapshot.profile.find_bill(bill_id)
        if bill is None:
            raise BillNotFoundError(bill_id)

        bills = tuple(b for b in snapshot.profile.recurring_bills if b.id != bill_id)
        self.repo.save(snapshot.with_profile(snapshot.profile.with_changes(recurring_bills=bills)))
        logger.info(f"User {user_id} deleted bill #{bill_id}")
        return bill

    def format_bills(self, user_id: int) -> str:
        """Formatted bill list with paid / due status for the current month."""
        profile = self._load(user_id).profile
        lang = profile.language
        if not profile.recurring_bills:
            return t(lang, "bills_empty")

        current = month_key(self.clock.today())
        lines = [t(lang, "bills_header")]
        for bill in profile.recurring_bills:
            if bill.is_paid_in(current):
                lines.append(t(lang, "bill_paid_line", id=bill.id, name=bill.name,
                               amount=money(bill.amount), date=bill.last_paid_date.isoformat()))
            else:
                lines.append(t(lang, "bill_due_line", id=bill.id, name=bill.name,
                               amount=money(bill.amount)))

        unpaid = compute_unpaid_bills(profile.recurring_bills, current)
        lines.append("")
        lines.append(t(lang, "bills_unpaid_total", amount=money(unpaid)))
        return "\n".join(lines)
