"""
handlers/start_handler.py
--------------------------
Handles /start, /help and /myid.
Creates an empty profile on first contact and shows available commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import language_of
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.profile_service import ProfileService
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger(__name__)
profile_service = ProfileService()

HELP_TEXT = """
🤖 *Masareefy*

*Setup:*
/setup <balance> <next salary YYYY-MM-DD> [interval days]
/savings <amount> - savings balance
/language <en|ar|ru>
/currency <USD|SAR|RUB|AED|EGP>

*Budget:*
/plans - suggested daily budgets
/plan <austerity|balanced|comfort> - choose a plan
/dashboard - balance, today's spending, runway
/report - this month by category, last 7 days

*Bills:*
/bills - fixed monthly bills
/add\\_bill <amount> <name>
/pay\\_bill <id> [nodeduct]
/delete\\_bill <id>

*Transactions:*
Just type "coffee 15" or "راتب 5000".
/spend <amount> [category] [note]
/income <amount> [note]
/today - today's transactions
/delete <id> - delete a transaction
/export\\_csv [year month]
/export\\_excel [year month]
/myid - your Telegram ID
"""


@authorized_only
@rate_limited
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - create the profile and show a welcome message."""
    user = update.effective_user
    profile_service.ensure_profile(user.id, user.first_name)
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(t(language_of(update), "welcome", name=user.first_name))


@authorized_only
@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


@authorized_only
@rate_limited
async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show user's Telegram ID for whitelisting."""
    user = update.effective_user
    await update.message.reply_text(
        f"🆔 `{user.id}`\nALLOWED\\_USER\\_IDS (.env)",
        parse_mode="Markdown",
    )
