"""Tests for SnapshotRepository against a fake connection pool."""

from datetime import date

import pytest

import db.connection
from models.plan import PlanType
from models.profile import Snapshot
from repositories.snapshot_repo import SnapshotRepository
from utils.errors import InvalidDateError
from tests.conftest import USER_ID, make_bill, make_profile, make_tx


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.fail:
            raise RuntimeError("boom")
        self.rowcount = self.conn.rowcount

    def fetchone(self):
        return self.conn.rows[0] if self.conn.rows else None

    def fetchall(self):
        return self.conn.rows


class FakeConnection:
    def __init__(self, rows=None, rowcount=1, fail=False):
        self.rows = rows or []
        self.rowcount = rowcount
        self.fail = fail
        self.executed = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakePool:
    def __init__(self, conn):
        self.conn = conn
        self.returned = 0

    def getconn(self):
        return self.conn

    def putconn(self, conn):
        self.returned += 1


@pytest.fixture
def use_conn(monkeypatch):
    def _install(conn):
        pool = FakePool(conn)
        monkeypatch.setattr(db.connection, "_pool", pool)
        return pool
    return _install


def test_load_missing_user(use_conn):
    pool = use_conn(FakeConnection())
    assert SnapshotRepository().load(USER_ID) is None
    assert pool.returned == 1


def test_load_builds_snapshot(use_conn):
    snapshot = Snapshot(
        profile=make_profile(recurring_bills=(make_bill("rent", 300, paid=date(2024, 1, 2)),)),
        transactions=(make_tx(10, date(2024, 1, 3)),),
    )
    use_conn(FakeConnection(rows=[snapshot.to_blob()]))
    assert SnapshotRepository().load(USER_ID) == snapshot


def test_load_malformed_date(use_conn):
    profile, txs = Snapshot(profile=make_profile()).to_blob()
    profile["nextSalaryDate"] = "soon"
    use_conn(FakeConnection(rows=[(profile, txs)]))
    with pytest.raises(InvalidDateError):
        SnapshotRepository().load(USER_ID)


def test_save_writes_json_blobs(use_conn):
    conn = FakeConnection()
    use_conn(conn)
    snapshot = Snapshot(profile=make_profile(), transactions=(make_tx(10, date(2024, 1, 3)),))
    SnapshotRepository().save(snapshot)

    _, params = conn.executed[0]
    assert params[0] == USER_ID
    assert params[1].adapted["currentBalance"] == 1000.0
    assert params[2].adapted[0]["amount"] == 10
    assert conn.commits == 1


def test_save_selected_plan_patches_two_keys(use_conn):
    conn = FakeConnection(rowcount=1)
    use_conn(conn)
    assert SnapshotRepository().save_selected_plan(USER_ID, PlanType.COMFORT, 67) is True
    sql, params = conn.executed[0]
    assert "profile || %s" in sql
    assert params[0].adapted == {"selectedPlan": "comfort", "dailyLimit": 67}
    assert params[1] == USER_ID


def test_save_selected_plan_unknown_user(use_conn):
    use_conn(FakeConnection(rowcount=0))
    assert SnapshotRepository().save_selected_plan(USER_ID, PlanType.COMFORT, 67) is False


def test_failed_write_rolls_back(use_conn):
    conn = FakeConnection(fail=True)
    pool = use_conn(conn)
    with pytest.raises(RuntimeError):
        SnapshotRepository().delete(USER_ID)
    assert conn.rollbacks == 1
    assert conn.commits == 0
    assert pool.returned == 1


def test_list_user_ids(use_conn):
    use_conn(FakeConnection(rows=[(1,), (42,)]))
    assert SnapshotRepository().list_user_ids() == [1, 42]


def test_pool_required(monkeypatch):
    monkeypatch.setattr(db.connection, "_pool", None)
    with pytest.raises(RuntimeError):
        SnapshotRepository().load(USER_ID)
