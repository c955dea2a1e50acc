"""
services/transaction_service.py
-------------------------------
Business logic for recording income and expenses.
Every transaction moves the balance of its wallet; large spending-wallet
income is treated as a salary and re-anchors the salary calendar.
"""

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from config import SALARY_MIN_AMOUNT
from models.profile import Snapshot, UserProfile
from models.transaction import Transaction, TransactionType, Wallet
from parsers.quick_entry import parse_quick_entry
from repositories.snapshot_repo import SnapshotRepository
from utils.clock import Clock, SystemClock
from utils.errors import ProfileNotFoundError, TransactionNotFoundError
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)

TRANSFER_CATEGORY = "transfer"


def new_id() -> str:
    """Short random id that users can type back in commands."""
    return uuid.uuid4().hex[:8]


def is_transfer(tx: Transaction) -> bool:
    return tx.category == TRANSFER_CATEGORY


def is_salary(tx: Transaction, salary_min: float = SALARY_MIN_AMOUNT) -> bool:
    return (
        tx.is_income()
        and tx.wallet == Wallet.SPENDING
        and not is_transfer(tx)
        and tx.amount > salary_min
    )


def apply_transaction(profile: UserProfile, tx: Transaction,
                      salary_min: float = SALARY_MIN_AMOUNT) -> UserProfile:
    """Return the profile with `tx` applied to the wallet balances and salary dates."""
    changes = {}
    if tx.wallet == Wallet.SPENDING:
        changes["current_balance"] = profile.current_balance + tx.signed_amount
    else:
        changes["savings_balance"] = profile.savings_balance + tx.signed_amount

    if is_salary(tx, salary_min):
        changes["last_salary_date"] = tx.day
        changes["last_salary_amount"] = tx.amount
        changes["next_salary_date"] = tx.day + timedelta(days=profile.salary_interval)

    return profile.with_changes(**changes)


def revert_transaction(profile: UserProfile, tx: Transaction) -> UserProfile:
    """Undo the balance effect of `tx`. Salary dates are left as they are."""
    if tx.wallet == Wallet.SPENDING:
        return profile.with_changes(current_balance=profile.current_balance - tx.signed_amount)
    return profile.with_changes(savings_balance=profile.savings_balance - tx.signed_amount)


def spent_on(transactions: Iterable[Transaction], day: date) -> float:
    """Spending-wallet expenses dated on `day`."""
    return sum(
        (x.amount for x in transactions
         if x.is_expense() and x.wallet == Wallet.SPENDING and x.day == day),
        0.0,
    )


def record_into(snapshot: Snapshot, tx: Transaction) -> Snapshot:
    """Prepend `tx` to the history (newest first) and apply it to the profile."""
    return Snapshot(
        profile=apply_transaction(snapshot.profile, tx),
        transactions=(tx,) + snapshot.transactions,
    )


@dataclass(frozen=True)
class RecordResult:
    transaction: Transaction
    covered_from_savings: float
    snapshot: Snapshot


@dataclass(frozen=True)
class DailyCheck:
    """Today's spending (including a new expense) against the selected daily limit."""
    spent_today: float
    daily_limit: float
    days_to_zero: Optional[float]

    @property
    def is_over(self) -> bool:
        return self.spent_today > self.daily_limit

    @property
    def left(self) -> float:
        return max(0.0, self.daily_limit - self.spent_today)


def check_daily_limit(snapshot: Snapshot, tx: Transaction) -> Optional[DailyCheck]:
    """
    Compare the spending-wallet total for the day of `tx` with the daily limit.

    Returns None unless `tx` is a spending expense and a limit is set.
    When over the limit, `days_to_zero` projects the remaining balance at
    today's total as a daily rate.
    """
    limit = snapshot.profile.daily_limit
    if not limit or limit <= 0 or not tx.is_expense() or tx.wallet != Wallet.SPENDING:
        return None

    spent = spent_on(snapshot.transactions, tx.day)
    days_to_zero = None
    if spent > limit:
        days_to_zero = max(0.0, snapshot.profile.current_balance) / spent
    return DailyCheck(spent_today=spent, daily_limit=limit, days_to_zero=days_to_zero)


class TransactionService:
    """
    Handles all business logic related to financial transactions.

    Workflow:
        1. Receive structured input (or raw text) from the handler.
        2. Build an immutable Transaction.
        3. Apply it to the snapshot and persist via the repository.
        4. Return a user-friendly response.
    """

    def __init__(self, repo: Optional[SnapshotRepository] = None, clock: Optional[Clock] = None):
        self.repo = repo or SnapshotRepository()
        self.clock = clock or SystemClock()

    def _load(self, user_id: int) -> Snapshot:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        return snapshot

    def record(
        self,
        user_id: int,
        tx_type: TransactionType,
        amount: float,
        category: str,
        wallet: Wallet = Wallet.SPENDING,
        vendor: str = "",
        note: str = "",
        on: Optional[datetime] = None,
        cover_from_savings: bool = False,
    ) -> RecordResult:
        """
        Record a transaction and update the wallet balances.

        Args:
            cover_from_savings: When a spending expense exceeds the spending
                balance, first move the shortfall (as far as savings allow)
                from the savings wallet.

        Raises:
            ValueError: If `amount` is not positive.
            ProfileNotFoundError: If the user has no snapshot.
        """
        if amount <= 0:
            raise ValueError(f"Transaction amount must be positive, got {amount}")

        snapshot = self._load(user_id)
        moment = on or self.clock.now()
        tx = Transaction(
            id=new_id(),
            amount=amount,
            date=moment,
            category=category,
            type=tx_type,
            wallet=wallet,
            vendor=vendor,
            note=note,
        )

        covered = 0.0
        if cover_from_savings and tx.is_expense() and wallet == Wallet.SPENDING:
            shortfall = amount - max(0.0, snapshot.profile.current_balance)
            covered = min(shortfall, max(0.0, snapshot.profile.savings_balance))
            if covered > 0:
                snapshot = self._transfer_to_spending(snapshot, covered, moment)

        snapshot = record_into(snapshot, tx)
        self.repo.save(snapshot)
        logger.info(f"User {user_id} recorded {tx.type.value} {tx.amount} ({tx.category}) #{tx.id}")
        return RecordResult(transaction=tx, covered_from_savings=covered, snapshot=snapshot)

    @staticmethod
    def _transfer_to_spending(snapshot: Snapshot, amount: float, moment: datetime) -> Snapshot:
        transfer_out = Transaction(
            id=new_id(), amount=amount, date=moment, category=TRANSFER_CATEGORY,
            type=TransactionType.EXPENSE, wallet=Wallet.SAVINGS,
            vendor="Transfer to Spending", note="Auto-cover deficit",
        )
        transfer_in = Transaction(
            id=new_id(), amount=amount, date=moment, category=TRANSFER_CATEGORY,
            type=TransactionType.INCOME, wallet=Wallet.SPENDING,
            vendor="From Savings", note="Auto-cover deficit",
        )
        return record_into(record_into(snapshot, transfer_out), transfer_in)

    def add_from_text(self, user_id: int, text: str) -> dict:
        """
        Parse a free-text message and record it.

        Returns:
            Dict with 'success' and 'message' keys.
        """
        snapshot = self._load(user_id)
        lang = snapshot.profile.language
        parsed = parse_quick_entry(text)
        if parsed is None:
            return {"success": False, "message": t(lang, "not_understood")}

        result = self.record(
            user_id,
            parsed.type,
            parsed.amount,
            parsed.category,
            vendor=parsed.vendor,
            note=text,
        )
        return {"success": True, "message": format_recorded(result)}

    def delete(self, user_id: int, transaction_id: str) -> Transaction:
        """
        Delete a transaction and reverse its balance effect.

        Raises:
            TransactionNotFoundError: If no transaction has that id.
        """
        snapshot = self._load(user_id)
        tx = next((x for x in snapshot.transactions if x.id == transaction_id), None)
        if tx is None:
            raise TransactionNotFoundError(transaction_id)

        remaining = [x for x in snapshot.transactions if x.id != transaction_id]
        updated = Snapshot(profile=revert_transaction(snapshot.profile, tx), transactions=tuple(remaining))
        self.repo.save(updated)
        logger.info(f"User {user_id} deleted transaction #{transaction_id}")
        return tx

    def today_summary(self, user_id: int) -> str:
        snapshot = self._load(user_id)
        lang = snapshot.profile.language
        today = self.clock.today()
        todays = [x for x in snapshot.transactions if x.day == today]
        if not todays:
            return t(lang, "today_empty")

        expense = sum(x.amount for x in todays if x.is_expense())
        income = sum(x.amount for x in todays if x.is_income())
        lines = [t(lang, "today_header", expense=money(expense), income=money(income))]
        lines.extend(f"  #{x.id} {x}" + (f" ({x.vendor})" if x.vendor else "") for x in todays)
        return "\n".join(lines)


def format_recorded(result: RecordResult) -> str:
    profile = result.snapshot.profile
    tx = result.transaction
    lang = profile.language
    msg = t(
        lang,
        "tx_recorded",
        emoji="💸" if tx.is_expense() else "💰",
        type=tx.type.value,
        amount=money(tx.amount),
        currency=profile.currency,
        category=tx.category,
        id=tx.id,
        balance=money(profile.current_balance),
    )
    if result.covered_from_savings > 0:
        msg += "\n" + t(lang, "tx_covered", amount=money(result.covered_from_savings))

    check = check_daily_limit(result.snapshot, tx)
    if check is not None and check.is_over:
        msg += "\n\n" + t(lang, "daily_over", spent=money(check.spent_today),
                            limit=money(check.daily_limit), days=round(check.days_to_zero))
    elif check is not None:
        msg += "\n\n" + t(lang, "daily_left", left=money(check.left), currency=profile.currency)
    return msg
