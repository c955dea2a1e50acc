"""
handlers/bill_handler.py
------------------------
Handles fixed monthly bill commands.
Delegates to BillService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import language_of, parse_amount_arg, replies_errors, reply_usage
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.bill_service import BillService
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)
bill_service = BillService()


@authorized_only
@rate_limited
@replies_errors
async def bills_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /bills - list bills with this month's payment status."""
    await update.message.reply_text(bill_service.format_bills(update.effective_user.id))


@authorized_only
@rate_limited
@replies_errors
async def add_bill_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /add_bill <amount> <name>.

    Example:
        /add_bill 1200 Rent
    """
    args = context.args or []
    amount = parse_amount_arg(args[0]) if args else None
    name = " ".join(args[1:]).strip()
    if amount is None or not name:
        await reply_usage(update, "/add_bill <amount> <name>")
        return

    bill = bill_service.add_bill(update.effective_user.id, name, amount)
    await update.message.reply_text(
        t(language_of(update), "bill_added", id=bill.id, name=bill.name, amount=money(bill.amount))
    )


@authorized_only
@rate_limited
@replies_errors
async def pay_bill_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /pay_bill <id> [nodeduct].

    By default the payment is deducted from the spending balance;
    `nodeduct` only marks the bill as paid.
    """
    args = context.args or []
    if not args:
        await reply_usage(update, "/pay_bill <id> [nodeduct]")
        return

    deduct = not (len(args) > 1 and args[1].lower() == "nodeduct")
    bill = bill_service.pay_bill(update.effective_user.id, args[0].lstrip("#"), deduct=deduct)
    await update.message.reply_text(
        t(language_of(update), "bill_paid", name=bill.name, date=bill.last_paid_date.isoformat())
    )


@authorized_only
@rate_limited
@replies_errors
async def delete_bill_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete_bill <id>."""
    args = context.args or []
    if not args:
        await reply_usage(update, "/delete_bill <id>")
        return

    bill = bill_service.delete_bill(update.effective_user.id, args[0].lstrip("#"))
    await update.message.reply_text(t(language_of(update), "bill_deleted", id=bill.id))
