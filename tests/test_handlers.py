"""Handler tests with in-memory services and a stub Telegram update."""

import asyncio
from datetime import date
from types import SimpleNamespace

import pytest

import config
import handlers.bill_handler as bill_handler
import handlers.common as common
import handlers.export_handler as export_handler
import handlers.plan_handler as plan_handler
import handlers.profile_handler as profile_handler
import handlers.report_handler as report_handler
import handlers.transaction_handler as transaction_handler
from models.plan import PlanType
from models.profile import Snapshot
from security.rate_limiter import limiter
from services.bill_service import BillService
from services.budget_service import BudgetService
from services.export_service import ExportService
from services.profile_service import ProfileService
from services.report_service import ReportService
from services.transaction_service import TransactionService
from utils.i18n import t
from tests.conftest import USER_ID, InMemorySnapshotRepository, make_bill, make_profile


@pytest.fixture
def memory_repo(monkeypatch, clock):
    repo = InMemorySnapshotRepository(
        Snapshot(profile=make_profile(recurring_bills=(make_bill("rent", 200, name="Rent"),)))
    )
    monkeypatch.setattr(config, "ALLOWED_USER_IDS", [])
    monkeypatch.setattr(common, "snapshot_repo", repo)
    monkeypatch.setattr(plan_handler, "budget_service", BudgetService(repo=repo, clock=clock))
    monkeypatch.setattr(bill_handler, "bill_service", BillService(repo=repo, clock=clock))
    monkeypatch.setattr(
        transaction_handler, "transaction_service", TransactionService(repo=repo, clock=clock)
    )
    limiter.reset()
    yield repo
    limiter.reset()


def run(handler, update, *args):
    asyncio.run(handler(update, SimpleNamespace(args=list(args))))


def test_plans_lists_offered_plans(memory_repo, stub_update):
    update = stub_update()
    run(plan_handler.plans_command, update)
    assert "Balanced" in update.replies[0]


def test_plan_selection(memory_repo, stub_update):
    update = stub_update()
    run(plan_handler.plan_command, update, "Balanced")
    profile = memory_repo.load(USER_ID).profile
    assert profile.selected_plan == PlanType.BALANCED
    assert profile.daily_limit == 57
    assert "57" in update.replies[0]


def test_plan_usage_on_unknown_type(memory_repo, stub_update):
    update = stub_update()
    run(plan_handler.plan_command, update, "lavish")
    assert update.replies == [t("en", "usage", usage=plan_handler._PLAN_USAGE)]
    assert memory_repo.load(USER_ID).profile.selected_plan is None


def test_missing_profile_gets_localized_error(memory_repo, stub_update):
    update = stub_update(user_id=7, language_code="ru")
    run(plan_handler.plans_command, update)
    assert update.replies == [t("ru", "error_no_profile")]


def test_unavailable_plan_reply(memory_repo, stub_update):
    memory_repo.save(Snapshot(profile=make_profile(current_balance=100.0,
                                                   recurring_bills=(make_bill("rent", 300),))))
    update = stub_update()
    run(plan_handler.plan_command, update, "comfort")
    assert update.replies == [t("en", "error_plan_unavailable")]


def test_quick_text_entry(memory_repo, stub_update):
    update = stub_update(text="coffee 15")
    run(transaction_handler.handle_text_message, update)
    assert memory_repo.load(USER_ID).profile.current_balance == 985
    assert "985" in update.replies[0]


def test_spend_rejects_bad_amount(memory_repo, stub_update):
    update = stub_update()
    run(transaction_handler.spend_command, update, "abc")
    assert memory_repo.saves == 0
    assert len(update.replies) == 1


def test_pay_bill_command(memory_repo, stub_update):
    update = stub_update()
    run(bill_handler.pay_bill_command, update, "#rent", "nodeduct")
    profile = memory_repo.load(USER_ID).profile
    assert profile.find_bill("rent").last_paid_date == date(2024, 1, 1)
    assert profile.current_balance == 1000
    assert update.replies == [t("en", "bill_paid", name="Rent", date="2024-01-01")]


def test_rate_limit(memory_repo, stub_update, monkeypatch):
    monkeypatch.setattr(limiter, "max_events", 1)
    first, second = stub_update(), stub_update()
    run(bill_handler.bills_command, first)
    run(bill_handler.bills_command, second)
    assert second.replies == [t("en", "rate_limited")]


def test_report_command(memory_repo, stub_update, monkeypatch, clock):
    monkeypatch.setattr(report_handler, "report_service", ReportService(repo=memory_repo, clock=clock))
    run(transaction_handler.spend_command, stub_update(), "25", "food")
    update = stub_update()
    run(report_handler.report_command, update)
    assert "food: 25 (100%)" in update.replies[0]


def test_export_defaults_to_clock_month(memory_repo, stub_update, monkeypatch, clock):
    monkeypatch.setattr(export_handler, "export_service", ExportService(repo=memory_repo, clock=clock))
    run(transaction_handler.spend_command, stub_update(), "25", "food")
    update = stub_update()
    run(export_handler.export_csv_command, update)
    assert update.replies == ["masareefy_2024_01.csv"]


def test_setup_accepts_arabic_digits(memory_repo, stub_update, monkeypatch):
    monkeypatch.setattr(profile_handler, "profile_service", ProfileService(repo=memory_repo))
    update = stub_update()
    run(profile_handler.setup_command, update, "٤٥٠٠", "٢٠٢٤-٠٢-٠١", "١٤")
    profile = memory_repo.load(USER_ID).profile
    assert profile.current_balance == 4500
    assert profile.next_salary_date == date(2024, 2, 1)
    assert profile.salary_interval == 14
