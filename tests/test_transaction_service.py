"""Tests for TransactionService: wallets, salary detection and deletion."""

from datetime import date, datetime

import pytest

from models.profile import Snapshot
from models.transaction import TransactionType, Wallet
from services.transaction_service import (
    TRANSFER_CATEGORY,
    TransactionService,
    apply_transaction,
    check_daily_limit,
    format_recorded,
    is_salary,
)
from utils.errors import ProfileNotFoundError, TransactionNotFoundError
from utils.i18n import t
from tests.conftest import USER_ID, InMemorySnapshotRepository, make_profile, make_tx


@pytest.fixture
def service(clock):
    repo = InMemorySnapshotRepository(Snapshot(profile=make_profile(savings_balance=500.0)))
    return TransactionService(repo=repo, clock=clock)


def stored(service):
    return service.repo.load(USER_ID)


class TestRecord:

    def test_expense_lowers_spending_balance(self, service):
        result = service.record(USER_ID, TransactionType.EXPENSE, 40, "food")
        assert result.snapshot.profile.current_balance == 960
        assert stored(service).transactions[0].id == result.transaction.id
        assert result.transaction.date == datetime(2024, 1, 1, 10, 0)

    def test_savings_wallet_is_separate(self, service):
        service.record(USER_ID, TransactionType.INCOME, 50, "gift", wallet=Wallet.SAVINGS)
        profile = stored(service).profile
        assert profile.savings_balance == 550
        assert profile.current_balance == 1000

    def test_newest_first(self, service, clock):
        first = service.record(USER_ID, TransactionType.EXPENSE, 1, "food").transaction
        clock.advance(hours=1)
        second = service.record(USER_ID, TransactionType.EXPENSE, 2, "food").transaction
        assert [x.id for x in stored(service).transactions] == [second.id, first.id]

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_amount_rejected(self, service, amount):
        with pytest.raises(ValueError):
            service.record(USER_ID, TransactionType.EXPENSE, amount, "food")
        assert service.repo.saves == 0

    def test_unknown_user(self, clock):
        service = TransactionService(repo=InMemorySnapshotRepository(), clock=clock)
        with pytest.raises(ProfileNotFoundError):
            service.record(USER_ID, TransactionType.EXPENSE, 5, "food")


class TestSalary:

    def test_large_income_reanchors_salary_calendar(self, service):
        service.record(USER_ID, TransactionType.INCOME, 5000, "salary", on=datetime(2024, 1, 1, 9))
        profile = stored(service).profile
        assert profile.last_salary_date == date(2024, 1, 1)
        assert profile.last_salary_amount == 5000
        assert profile.next_salary_date == date(2024, 1, 31)

    def test_small_income_is_not_salary(self, service):
        service.record(USER_ID, TransactionType.INCOME, 100, "gift")
        profile = stored(service).profile
        assert profile.last_salary_date is None
        assert profile.next_salary_date == date(2024, 1, 11)

    def test_transfers_are_not_salary(self):
        tx = make_tx(900, date(2024, 1, 1), tx_type=TransactionType.INCOME, category=TRANSFER_CATEGORY)
        assert not is_salary(tx)

    def test_savings_income_is_not_salary(self):
        tx = make_tx(900, date(2024, 1, 1), tx_type=TransactionType.INCOME, wallet=Wallet.SAVINGS)
        assert not is_salary(tx)
        assert apply_transaction(make_profile(), tx).savings_balance == 900


class TestCoverFromSavings:

    def test_shortfall_moves_from_savings(self, service):
        result = service.record(USER_ID, TransactionType.EXPENSE, 1200, "shopping", cover_from_savings=True)
        assert result.covered_from_savings == 200
        profile = stored(service).profile
        assert profile.current_balance == 0
        assert profile.savings_balance == 300

        expense, transfer_in, transfer_out = stored(service).transactions
        assert expense.id == result.transaction.id
        assert transfer_in.wallet == Wallet.SPENDING and transfer_in.is_income()
        assert transfer_out.wallet == Wallet.SAVINGS and transfer_out.is_expense()
        assert transfer_in.category == transfer_out.category == TRANSFER_CATEGORY

    def test_cover_limited_by_savings(self, service):
        result = service.record(USER_ID, TransactionType.EXPENSE, 2000, "shopping", cover_from_savings=True)
        assert result.covered_from_savings == 500
        profile = stored(service).profile
        assert profile.savings_balance == 0
        assert profile.current_balance == -500

    def test_no_cover_when_balance_suffices(self, service):
        result = service.record(USER_ID, TransactionType.EXPENSE, 10, "food", cover_from_savings=True)
        assert result.covered_from_savings == 0
        assert len(stored(service).transactions) == 1


class TestTextAndDelete:

    def test_add_from_text(self, service):
        result = service.add_from_text(USER_ID, "coffee 15")
        assert result["success"] is True
        tx = stored(service).transactions[0]
        assert (tx.amount, tx.category, tx.note) == (15.0, "food", "coffee 15")

    def test_add_from_text_not_understood(self, service):
        result = service.add_from_text(USER_ID, "hello")
        assert result["success"] is False
        assert service.repo.saves == 0

    def test_delete_reverses_balance(self, service):
        tx = service.record(USER_ID, TransactionType.EXPENSE, 40, "food").transaction
        service.delete(USER_ID, tx.id)
        snapshot = stored(service)
        assert snapshot.profile.current_balance == 1000
        assert snapshot.transactions == ()

    def test_delete_unknown(self, service):
        with pytest.raises(TransactionNotFoundError):
            service.delete(USER_ID, "nope")

    def test_today_summary(self, service, clock):
        assert service.today_summary(USER_ID) == t("en", "today_empty")
        service.record(USER_ID, TransactionType.EXPENSE, 40, "food")
        service.record(USER_ID, TransactionType.INCOME, 10, "gift")
        summary = service.today_summary(USER_ID)
        assert "40" in summary
        assert "gift" in summary


class TestDailyLimitCheck:

    @pytest.fixture
    def limited(self, clock):
        repo = InMemorySnapshotRepository(Snapshot(profile=make_profile(daily_limit=100.0)))
        return TransactionService(repo=repo, clock=clock)

    def test_within_limit_reports_what_is_left(self, limited):
        result = limited.record(USER_ID, TransactionType.EXPENSE, 40, "food")
        check = check_daily_limit(result.snapshot, result.transaction)
        assert check.spent_today == 40
        assert check.is_over is False
        assert check.left == 60
        assert t("en", "daily_left", left="60", currency="SAR") in format_recorded(result)

    def test_over_limit_projects_days_to_zero(self, limited):
        limited.record(USER_ID, TransactionType.EXPENSE, 40, "food")
        result = limited.record(USER_ID, TransactionType.EXPENSE, 80, "shopping")
        check = check_daily_limit(result.snapshot, result.transaction)
        assert check.spent_today == 120
        assert check.is_over is True
        # 880 left at 120 a day
        assert check.days_to_zero == pytest.approx(880 / 120)
        assert t("en", "daily_over", spent="120", limit="100", days=7) in format_recorded(result)

    def test_yesterday_does_not_count(self, limited, clock):
        limited.record(USER_ID, TransactionType.EXPENSE, 90, "food")
        clock.advance(days=1)
        result = limited.record(USER_ID, TransactionType.EXPENSE, 20, "food")
        assert check_daily_limit(result.snapshot, result.transaction).spent_today == 20

    def test_no_verdict_without_limit_or_for_income(self, service, limited):
        plain = service.record(USER_ID, TransactionType.EXPENSE, 40, "food")
        assert check_daily_limit(plain.snapshot, plain.transaction) is None
        income = limited.record(USER_ID, TransactionType.INCOME, 40, "gift")
        assert check_daily_limit(income.snapshot, income.transaction) is None
        saving = limited.record(USER_ID, TransactionType.EXPENSE, 40, "gift", wallet=Wallet.SAVINGS)
        assert check_daily_limit(saving.snapshot, saving.transaction) is None
