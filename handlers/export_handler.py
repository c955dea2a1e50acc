"""
handlers/export_handler.py
---------------------------
Handles data export commands (CSV, Excel).
Delegates to ExportService.
"""

from datetime import date

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import language_of, replies_errors, reply_usage
from services.export_service import ExportService
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger(__name__)
export_service = ExportService()


def _month_from_args(args: list[str], today: date) -> tuple[int, int]:
    """(year, month) from `[year month]`, defaulting to the month of `today`."""
    if len(args) >= 2:
        year, month = int(args[0]), int(args[1])
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range: {month}")
        return year, month
    return today.year, today.month


async def _send_export(update: Update, context: ContextTypes.DEFAULT_TYPE, excel: bool) -> None:
    command = "/export_excel" if excel else "/export_csv"
    try:
        year, month = _month_from_args(context.args or [], export_service.clock.today())
    except ValueError:
        await reply_usage(update, f"{command} [year month]")
        return

    user = update.effective_user
    if export_service.count_month(user.id, year, month) == 0:
        await update.message.reply_text(t(language_of(update), "export_empty"))
        return

    if excel:
        buffer = export_service.export_month_excel(user.id, year, month)
        filename = f"masareefy_{year}_{month:02d}.xlsx"
    else:
        buffer = export_service.export_month_csv(user.id, year, month)
        filename = f"masareefy_{year}_{month:02d}.csv"

    await update.message.reply_document(document=buffer, filename=filename, caption=f"📊 {month}/{year}")


@authorized_only
@rate_limited
@replies_errors
async def export_csv_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /export_csv command - send current month's data as CSV.
    Optional: /export_csv 2026 1 (for January 2026).
    """
    await _send_export(update, context, excel=False)


@authorized_only
@rate_limited
@replies_errors
async def export_excel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /export_excel command - send current month's data as Excel.
    Optional: /export_excel 2026 1 (for January 2026).
    """
    await _send_export(update, context, excel=True)
