"""
security/rate_limiter.py
-------------------------
Rate limiting middleware to prevent abuse.
Limits the number of messages a user can send within a sliding time window.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS
from security.auth import telegram_language
from utils.i18n import t
from utils.logger import get_logger

logger = get_logger(__name__)


class SlidingWindowLimiter:
    """Allows at most `max_events` per key within the last `window_seconds`."""

    def __init__(self, max_events: int, window_seconds: float, timer: Callable[[], float] = time.monotonic):
        self.max_events = max_events
        self.window_seconds = window_seconds
        self._timer = timer
        self._events: dict[int, list[float]] = defaultdict(list)

    def allow(self, key: int) -> bool:
        now = self._timer()
        cutoff = now - self.window_seconds
        recent = [ts for ts in self._events[key] if ts > cutoff]
        if len(recent) >= self.max_events:
            self._events[key] = recent
            return False
        recent.append(now)
        self._events[key] = recent
        return True

    def reset(self) -> None:
        self._events.clear()


limiter = SlidingWindowLimiter(RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS)


def rate_limited(func: Callable):
    """
    Decorator that enforces rate limiting per user.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max messages per window (default: 30).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not limiter.allow(user.id):
            logger.warning(f"⚠️ Rate limit hit for user {user.id}")
            await update.message.reply_text(t(telegram_language(update), "rate_limited"))
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
