"""
handlers/profile_handler.py
---------------------------
Handles onboarding and settings commands.
Delegates to ProfileService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from config import DEFAULT_SALARY_INTERVAL_DAYS, SUPPORTED_CURRENCIES, SUPPORTED_LANGUAGES
from handlers.common import parse_amount_arg, parse_number_arg, replies_errors, reply_usage
from parsers.quick_entry import normalize_digits
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.profile_service import ProfileService
from utils.dates import parse_date
from utils.i18n import money, t
from utils.logger import get_logger

logger = get_logger(__name__)
profile_service = ProfileService()


@authorized_only
@rate_limited
@replies_errors
async def setup_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /setup <balance> <next salary date> [interval days].

    Example:
        /setup 4500 2024-02-01 30
    """
    args = context.args or []
    if len(args) < 2:
        await reply_usage(update, "/setup <balance> <YYYY-MM-DD> [days]")
        return

    # A negative spending balance is allowed; the engine treats it as zero.
    balance = parse_number_arg(args[0])
    if balance is None:
        await reply_usage(update, "/setup <balance> <YYYY-MM-DD> [days]")
        return
    next_salary = parse_date(normalize_digits(args[1]), "nextSalaryDate")
    interval = int(normalize_digits(args[2])) if len(args) > 2 else DEFAULT_SALARY_INTERVAL_DAYS

    user = update.effective_user
    profile = profile_service.setup(user.id, balance, next_salary, interval, name=user.first_name)
    await update.message.reply_text(t(
        profile.language,
        "setup_done",
        balance=money(profile.current_balance),
        currency=profile.currency,
        next_salary=profile.next_salary_date.isoformat(),
        interval=profile.salary_interval,
    ))


@authorized_only
@rate_limited
@replies_errors
async def savings_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /savings <amount> - set the savings wallet balance."""
    args = context.args or []
    amount = parse_amount_arg(args[0], allow_zero=True) if args else None
    if amount is None:
        await reply_usage(update, "/savings <amount>")
        return

    profile = profile_service.set_savings(update.effective_user.id, amount)
    await update.message.reply_text(t(
        profile.language, "savings_set",
        amount=money(profile.savings_balance), currency=profile.currency,
    ))


@authorized_only
@rate_limited
@replies_errors
async def language_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /language <en|ar|ru>."""
    args = context.args or []
    if not args or args[0].lower() not in SUPPORTED_LANGUAGES:
        await reply_usage(update, "/language " + "|".join(SUPPORTED_LANGUAGES))
        return

    profile = profile_service.set_language(update.effective_user.id, args[0].lower())
    await update.message.reply_text(t(profile.language, "language_set"))


@authorized_only
@rate_limited
@replies_errors
async def currency_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /currency <code>."""
    args = context.args or []
    if not args or args[0].upper() not in SUPPORTED_CURRENCIES:
        await reply_usage(update, "/currency " + "|".join(SUPPORTED_CURRENCIES))
        return

    profile = profile_service.set_currency(update.effective_user.id, args[0])
    await update.message.reply_text(t(profile.language, "currency_set", currency=profile.currency))
