"""
repositories/snapshot_repo.py
-----------------------------
Data access layer for user snapshots.
Each user is one row of `user_snapshots`: a profile blob and a transactions blob.
"""

from typing import Optional

from psycopg2.extras import Json

from db.connection import get_connection, release_connection, transaction
from models.plan import PlanType
from models.profile import Snapshot
from utils.logger import get_logger

logger = get_logger(__name__)


class SnapshotRepository:
    """Repository for reading and writing whole-user snapshots."""

    # ── READ ──────────────────────────────────────────────

    def load(self, user_id: int) -> Optional[Snapshot]:
        """
        Load a user's snapshot.

        Returns:
            The Snapshot, or None if the user has never been saved.

        Raises:
            InvalidDateError: If a stored date is malformed.
        """
        sql = "SELECT profile, transactions FROM user_snapshots WHERE telegram_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
        finally:
            release_connection(conn)

        if row is None:
            return None
        return Snapshot.from_blob(row[0], row[1])

    def list_user_ids(self) -> list[int]:
        """All users with a stored snapshot, used by scheduled jobs."""
        sql = "SELECT telegram_id FROM user_snapshots ORDER BY telegram_id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [r[0] for r in cur.fetchall()]
        finally:
            release_connection(conn)

    # ── WRITE ─────────────────────────────────────────────

    def save(self, snapshot: Snapshot) -> None:
        """Insert or replace the user's whole snapshot."""
        profile, transactions = snapshot.to_blob()
        sql = """
            INSERT INTO user_snapshots (telegram_id, profile, transactions, updated_at)
            VALUES (%s, %s, %s, NOW())
            ON CONFLICT (telegram_id)
            DO UPDATE SET profile = EXCLUDED.profile,
                          transactions = EXCLUDED.transactions,
                          updated_at = NOW();
        """
        with transaction() as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (snapshot.user_id, Json(profile), Json(transactions)))
        logger.info(
            f"Saved snapshot for user {snapshot.user_id} "
            f"({len(transactions)} transactions, {len(profile['recurringBills'])} bills)"
        )

    def save_selected_plan(self, user_id: int, plan_type: PlanType, daily_limit: float) -> bool:
        """
        Persist only the chosen plan type and its daily limit.

        Returns:
            True if the user's row existed and was updated.
        """
        sql = """
            UPDATE user_snapshots
            SET profile = profile || %s, updated_at = NOW()
            WHERE telegram_id = %s;
        """
        patch = {"selectedPlan": plan_type.value, "dailyLimit": daily_limit}
        with transaction() as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (Json(patch), user_id))
                updated = cur.rowcount > 0
        if updated:
            logger.info(f"User {user_id} selected plan '{plan_type.value}' ({daily_limit}/day)")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int) -> bool:
        sql = "DELETE FROM user_snapshots WHERE telegram_id = %s;"
        with transaction() as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                deleted = cur.rowcount > 0
        if deleted:
            logger.info(f"Deleted snapshot for user {user_id}")
        return deleted
