"""
main.py
-------
Entry point for the Masareefy Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Configure and start the Telegram bot with all handlers.
    - Schedule the daily low-funds check.
"""

from datetime import time as dt_time

from telegram import BotCommand
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from config import LOW_FUNDS_CHECK_HOUR, TELEGRAM_BOT_TOKEN
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.bill_handler import (
    add_bill_command,
    bills_command,
    delete_bill_command,
    pay_bill_command,
)
from handlers.dashboard_handler import dashboard_command
from handlers.export_handler import export_csv_command, export_excel_command
from handlers.plan_handler import plan_command, plans_command
from handlers.profile_handler import (
    currency_command,
    language_command,
    savings_command,
    setup_command,
)
from handlers.report_handler import report_command
from handlers.start_handler import help_command, myid_command, start_command
from handlers.transaction_handler import (
    delete_command,
    handle_text_message,
    income_command,
    spend_command,
    today_command,
)
from services.dashboard_service import DashboardService
from utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = {
    "start": start_command,
    "help": help_command,
    "myid": myid_command,
    "setup": setup_command,
    "savings": savings_command,
    "language": language_command,
    "currency": currency_command,
    "plans": plans_command,
    "plan": plan_command,
    "dashboard": dashboard_command,
    "report": report_command,
    "bills": bills_command,
    "add_bill": add_bill_command,
    "pay_bill": pay_bill_command,
    "delete_bill": delete_bill_command,
    "spend": spend_command,
    "income": income_command,
    "today": today_command,
    "delete": delete_command,
    "export_csv": export_csv_command,
    "export_excel": export_excel_command,
}


async def send_low_funds_alerts(context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Scheduled job: warn users whose balance is projected to run out
    before their next salary. Runs daily at LOW_FUNDS_CHECK_HOUR.
    """
    for user_id, text in DashboardService().low_funds_alerts():
        try:
            await context.bot.send_message(chat_id=user_id, text=text, parse_mode="Markdown")
            logger.info(f"Sent low-funds alert to user {user_id}")
        except Exception as e:
            logger.error(f"Failed to send low-funds alert to {user_id}: {e}")


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log anything a handler did not handle itself."""
    logger.error(f"Unhandled error while processing {update!r}", exc_info=context.error)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "🚀 Start"),
        BotCommand("help", "📖 Help"),
        BotCommand("setup", "⚙️ Balance and salary date"),
        BotCommand("plans", "📋 Budget plans"),
        BotCommand("plan", "✅ Choose a plan"),
        BotCommand("dashboard", "💳 Dashboard"),
        BotCommand("report", "📊 Spending report"),
        BotCommand("bills", "🧾 Fixed bills"),
        BotCommand("add_bill", "➕ Add a bill"),
        BotCommand("pay_bill", "💸 Pay a bill"),
        BotCommand("spend", "📉 Record an expense"),
        BotCommand("income", "📈 Record income"),
        BotCommand("today", "📅 Today"),
        BotCommand("delete", "🗑️ Delete a transaction"),
        BotCommand("export_csv", "📄 Export CSV"),
        BotCommand("export_excel", "📊 Export Excel"),
        BotCommand("language", "🌐 Language"),
        BotCommand("myid", "🆔 Your Telegram ID"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()

    # ── 3. Register command handlers ──────────────────────
    for name, handler in COMMANDS.items():
        app.add_handler(CommandHandler(name, handler))

    # ── 4. Register text message handler (catch-all) ──────
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text_message))
    app.add_error_handler(on_error)

    # ── 5. Schedule jobs ──────────────────────────────────
    job_queue = app.job_queue
    if job_queue:
        job_queue.run_daily(
            send_low_funds_alerts,
            time=dt_time(hour=LOW_FUNDS_CHECK_HOUR, minute=0),
            name="daily_low_funds",
        )
        logger.info(f"Scheduled daily low-funds check ({LOW_FUNDS_CHECK_HOUR:02d}:00)")

    # ── 6. Start polling ──────────────────────────────────
    logger.info("🚀 Masareefy is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])

    # ── 7. Cleanup on shutdown ────────────────────────────
    close_pool()
    logger.info("Masareefy stopped.")


if __name__ == "__main__":
    main()
