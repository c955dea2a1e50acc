"""
handlers/plan_handler.py
------------------------
Handles budget plan commands.
Delegates to BudgetService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import language_of, replies_errors, reply_usage
from models.plan import PlanType
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.budget_service import BudgetService
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)
budget_service = BudgetService()

_PLAN_USAGE = "/plan " + " | ".join(p.value for p in PlanType)


@authorized_only
@rate_limited
@replies_errors
async def plans_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /plans - show the plans offered for today."""
    msg = budget_service.format_report(update.effective_user.id)
    await update.message.reply_text(msg, parse_mode="Markdown")


@authorized_only
@rate_limited
@replies_errors
async def plan_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /plan <type> - select a plan.

    Usage:
        /plan balanced
    """
    args = context.args or []
    try:
        plan_type = PlanType(args[0].lower()) if args else None
    except ValueError:
        plan_type = None
    if plan_type is None:
        await reply_usage(update, _PLAN_USAGE)
        return

    user = update.effective_user
    plan = budget_service.select_plan(user.id, plan_type)
    profile = budget_service.load_snapshot(user.id).profile
    lang = language_of(update)
    await update.message.reply_text(
        t(lang, "plan_selected", title=plan.title(lang), limit=money(plan.daily_limit),
          currency=profile.currency),
        parse_mode="Markdown",
    )
