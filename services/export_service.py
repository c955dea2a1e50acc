"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of a month's transactions.
"""

import io
from typing import Optional

import pandas as pd

from models.profile import Snapshot
from repositories.snapshot_repo import SnapshotRepository
from utils.clock import Clock, SystemClock
from utils.errors import ProfileNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = ["date", "type", "wallet", "amount", "currency", "category", "vendor", "note"]


def month_frame(snapshot: Snapshot, year: int, month: int) -> pd.DataFrame:
    """One row per transaction in the given month, oldest first."""
    currency = snapshot.profile.currency
    rows = [
        {
            "date": x.day.isoformat(),
            "type": x.type.value,
            "wallet": x.wallet.value,
            "amount": x.amount,
            "currency": currency,
            "category": x.category,
            "vendor": x.vendor,
            "note": x.note,
        }
        for x in snapshot.transactions
        if x.date.year == year and x.date.month == month
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.sort_values("date", kind="stable").reset_index(drop=True)


class ExportService:
    """Generates downloadable transaction reports in CSV and Excel formats."""

    def __init__(self, repo: Optional[SnapshotRepository] = None, clock: Optional[Clock] = None):
        self.repo = repo or SnapshotRepository()
        self.clock = clock or SystemClock()

    def _frame(self, user_id: int, year: int, month: int) -> pd.DataFrame:
        snapshot = self.repo.load(user_id)
        if snapshot is None:
            raise ProfileNotFoundError(user_id)
        return month_frame(snapshot, year, month)

    def export_month_csv(self, user_id: int, year: int, month: int) -> io.BytesIO:
        """
        Export a month's transactions as a CSV file.

        Returns:
            A BytesIO buffer containing UTF-8 (with BOM) CSV data.
        """
        df = self._frame(user_id, year, month)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} records as CSV for user {user_id}")
        return buffer

    def export_month_excel(self, user_id: int, year: int, month: int) -> io.BytesIO:
        """
        Export a month's transactions as an Excel (.xlsx) file, with a
        per-category expense summary on a second sheet.
        """
        df = self._frame(user_id, year, month)
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Transactions", index=False)

            expenses = df[df["type"] == "expense"]
            if not expenses.empty:
                summary = expenses.groupby("category")["amount"].sum().reset_index()
                summary.columns = ["category", "total"]
                summary.to_excel(writer, sheet_name="Summary", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} records as Excel for user {user_id}")
        return buffer

    def count_month(self, user_id: int, year: int, month: int) -> int:
        return len(self._frame(user_id, year, month))
