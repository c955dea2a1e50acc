"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "masareefy")
DB_USER: str = os.getenv("DB_USER", "masareefy_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# ── Security ──────────────────────────────────────────────
_raw_ids = os.getenv("ALLOWED_USER_IDS", "")
ALLOWED_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Rate Limiting ─────────────────────────────────────────
RATE_LIMIT_MESSAGES: int = int(os.getenv("RATE_LIMIT_MESSAGES", "30"))
RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Locale ────────────────────────────────────────────────
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "ar", "ru")
SUPPORTED_CURRENCIES: tuple[str, ...] = ("USD", "SAR", "RUB", "AED", "EGP")
DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "ar")
DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "USD")

# ── Budget engine ─────────────────────────────────────────
DEFAULT_SALARY_INTERVAL_DAYS: int = int(os.getenv("DEFAULT_SALARY_INTERVAL_DAYS", "30"))
BURN_WINDOW_DAYS: int = int(os.getenv("BURN_WINDOW_DAYS", "10"))
LOW_FUNDS_THRESHOLD_DAYS: int = int(os.getenv("LOW_FUNDS_THRESHOLD_DAYS", "10"))
# Spending-wallet income above this amount is treated as a salary deposit.
SALARY_MIN_AMOUNT: float = float(os.getenv("SALARY_MIN_AMOUNT", "100"))

# ── Scheduler ─────────────────────────────────────────────
LOW_FUNDS_CHECK_HOUR: int = int(os.getenv("LOW_FUNDS_CHECK_HOUR", "9"))
