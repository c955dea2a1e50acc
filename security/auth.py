"""
security/auth.py
-----------------
Authentication middleware for the Telegram bot.
Blocks any user not in the allowed whitelist.
"""

from functools import wraps
from typing import Callable, Optional

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger(__name__)


def telegram_language(update: Update) -> str:
    """Best-effort reply language for users who may not have a profile yet."""
    user = update.effective_user
    code: Optional[str] = getattr(user, "language_code", None) if user else None
    if code and code[:2] in config.SUPPORTED_LANGUAGES:
        return code[:2]
    return config.DEFAULT_LANGUAGE


def is_allowed(user_id: int) -> bool:
    """An empty whitelist allows everyone (dev mode)."""
    return not config.ALLOWED_USER_IDS or user_id in config.ALLOWED_USER_IDS


def authorized_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted users only.

    Usage:
        @authorized_only
        async def my_handler(update, context):
            ...
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not is_allowed(user.id):
            logger.warning(
                f"🚫 Unauthorized access attempt: user_id={user.id}, username={user.username}"
            )
            await update.message.reply_text(t(telegram_language(update), "unauthorized"))
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
