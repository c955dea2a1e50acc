"""
handlers/common.py
------------------
Helpers shared by all handlers: reply language, argument parsing and
turning expected errors into a localized reply.
"""

from functools import wraps
from typing import Callable, Optional

from telegram import Update
from telegram.ext import ContextTypes

from parsers.quick_entry import normalize_digits
from repositories.snapshot_repo import SnapshotRepository
from security.auth import telegram_language
from utils.errors import MasareefyError
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger(__name__)
snapshot_repo = SnapshotRepository()


def language_of(update: Update) -> str:
    """The profile language if the user has one, else Telegram's client language."""
    user = update.effective_user
    if user is not None:
        try:
            snapshot = snapshot_repo.load(user.id)
        except MasareefyError:
            snapshot = None
        if snapshot is not None:
            return snapshot.profile.language
    return telegram_language(update)


def parse_number_arg(raw: str) -> Optional[float]:
    """Parse any number typed by the user (Arabic digits and thousands commas allowed)."""
    try:
        return float(normalize_digits(raw).replace(",", ""))
    except ValueError:
        return None


def parse_amount_arg(raw: str, allow_zero: bool = False) -> Optional[float]:
    """Parse a positive amount typed by the user."""
    amount = parse_number_arg(raw)
    if amount is None:
        return None
    if amount > 0 or (allow_zero and amount == 0):
        return amount
    return None


async def reply_usage(update: Update, usage: str) -> None:
    await update.message.reply_text(t(language_of(update), "usage", usage=usage))


def replies_errors(func: Callable):
    """
    Decorator that answers MasareefyError / ValueError with a localized
    message instead of letting them reach the global error handler.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        try:
            return await func(update, context, *args, **kwargs)
        except MasareefyError as e:
            logger.info(f"{func.__name__}: {e}")
            await update.message.reply_text(t(language_of(update), e.message_key))
        except ValueError as e:
            logger.info(f"{func.__name__}: rejected input: {e}")
            await update.message.reply_text(t(language_of(update), "error_generic"))

    return wrapper
