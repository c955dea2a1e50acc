"""Tests for burn rate and low-funds warnings."""

from datetime import datetime, timedelta

import pytest

from engine.runway import BurnRate, compute_burn_rate, recent_spending, should_warn_low_funds
from models.transaction import TransactionType, Wallet
from tests.conftest import make_tx

NOW = datetime(2024, 1, 20, 12, 0)


def five_daily_expenses():
    return [make_tx(100, NOW - timedelta(days=d), tx_id=f"e{d}") for d in range(5)]


class TestBurnRate:

    def test_average_over_ten_days(self):
        burn = compute_burn_rate(five_daily_expenses(), 300, NOW)
        assert burn.daily_burn == pytest.approx(50)
        assert burn.days_to_zero == pytest.approx(6)

    def test_no_spending_means_no_projection(self):
        assert compute_burn_rate([], 300, NOW) is None

    def test_income_and_savings_are_ignored(self):
        txs = five_daily_expenses() + [
            make_tx(900, NOW, tx_type=TransactionType.INCOME, tx_id="inc"),
            make_tx(400, NOW, wallet=Wallet.SAVINGS, tx_id="sav"),
        ]
        assert compute_burn_rate(txs, 300, NOW).daily_burn == pytest.approx(50)

    def test_old_expenses_fall_outside_window(self):
        txs = five_daily_expenses() + [make_tx(1000, NOW - timedelta(days=11), tx_id="old")]
        assert recent_spending(txs, NOW) == pytest.approx(500)

    def test_custom_window(self):
        burn = compute_burn_rate(five_daily_expenses(), 100, NOW, window_days=5)
        assert burn.daily_burn == pytest.approx(100)
        assert burn.days_to_zero == pytest.approx(1)

    @pytest.mark.parametrize("window", [0, -3])
    def test_non_positive_window_rejected(self, window):
        with pytest.raises(ValueError):
            compute_burn_rate(five_daily_expenses(), 100, NOW, window_days=window)

    def test_negative_balance_gives_negative_runway(self):
        burn = compute_burn_rate(five_daily_expenses(), -100, NOW)
        assert burn.days_to_zero < 0


class TestLowFundsWarning:

    def test_warns_when_money_runs_out_before_payday(self):
        burn = BurnRate(daily_burn=50, days_to_zero=6)
        assert should_warn_low_funds(burn, days_until_salary=8) is True

    def test_quiet_when_salary_arrives_first(self):
        burn = BurnRate(daily_burn=50, days_to_zero=6)
        assert should_warn_low_funds(burn, days_until_salary=5) is False

    def test_quiet_beyond_threshold(self):
        burn = BurnRate(daily_burn=10, days_to_zero=12)
        assert should_warn_low_funds(burn, days_until_salary=30) is False

    def test_quiet_without_burn(self):
        assert should_warn_low_funds(None, days_until_salary=30) is False
