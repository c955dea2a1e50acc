"""
handlers/transaction_handler.py
-------------------------------
Handles income/expense interactions: quick text entry, /spend, /income,
/today and /delete. Delegates all logic to TransactionService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import language_of, parse_amount_arg, replies_errors, reply_usage
from models.transaction import TransactionType
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.transaction_service import TransactionService, format_recorded
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger(__name__)
transaction_service = TransactionService()


@authorized_only
@rate_limited
@replies_errors
async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle any plain text message (not a command).
    Parses it with the quick-entry parser and records the result.
    """
    text = update.message.text.strip()
    if not text:
        return

    result = transaction_service.add_from_text(update.effective_user.id, text)
    await update.message.reply_text(result["message"])


@authorized_only
@rate_limited
@replies_errors
async def spend_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /spend <amount> [category] [note].
    A shortfall in the spending wallet is covered from savings.
    """
    args = context.args or []
    amount = parse_amount_arg(args[0]) if args else None
    if amount is None:
        await reply_usage(update, "/spend <amount> [category] [note]")
        return

    category = args[1].lower() if len(args) > 1 else "other"
    note = " ".join(args[2:])
    result = transaction_service.record(
        update.effective_user.id,
        TransactionType.EXPENSE,
        amount,
        category,
        note=note,
        cover_from_savings=True,
    )
    await update.message.reply_text(format_recorded(result))


@authorized_only
@rate_limited
@replies_errors
async def income_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /income <amount> [note]. Amounts above the salary threshold count as salary."""
    args = context.args or []
    amount = parse_amount_arg(args[0]) if args else None
    if amount is None:
        await reply_usage(update, "/income <amount> [note]")
        return

    result = transaction_service.record(
        update.effective_user.id,
        TransactionType.INCOME,
        amount,
        "salary",
        note=" ".join(args[1:]),
    )
    await update.message.reply_text(format_recorded(result))


@authorized_only
@rate_limited
@replies_errors
async def today_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /today command - show today's transactions."""
    await update.message.reply_text(transaction_service.today_summary(update.effective_user.id))


@authorized_only
@rate_limited
@replies_errors
async def delete_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete <id> - delete a transaction and restore its balance effect."""
    args = context.args or []
    if not args:
        await reply_usage(update, "/delete <id>")
        return

    tx = transaction_service.delete(update.effective_user.id, args[0].lstrip("#"))
    await update.message.reply_text(t(language_of(update), "tx_deleted", id=tx.id))
