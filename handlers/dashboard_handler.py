"""
handlers/dashboard_handler.py
-----------------------------
Handles /dashboard. Delegates to DashboardService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import replies_errors
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.dashboard_service import DashboardService

dashboard_service = DashboardService()


@authorized_only
@rate_limited
@replies_errors
async def dashboard_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /dashboard - balances, today's progress and runway."""
    msg = dashboard_service.format_dashboard(update.effective_user.id)
    await update.message.reply_text(msg, parse_mode="Markdown")
