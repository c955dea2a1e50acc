"""
handlers/report_handler.py
--------------------------
Handles /report. Delegates to ReportService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import replies_errors
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.report_service import ReportService

report_service = ReportService()


@authorized_only
@rate_limited
@replies_errors
async def report_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /report - this month by category and the last 7 days."""
    await update.message.reply_text(report_service.format_report(update.effective_user.id))
