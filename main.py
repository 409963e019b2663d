"""
main.py
-------
Entry point for the NewsBot Telegram bot.

Responsibilities:
    - Build the shared HTTP client, the news catalog and the services.
    - Configure and start the Telegram bot with all handlers.
    - Schedule the daily briefing job.
"""

from datetime import time as dt_time
from zoneinfo import ZoneInfo

from telegram import BotCommand
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    MessageHandler,
    filters,
)

from config import (
    DAILY_JOB_HOUR,
    DAILY_JOB_MINUTE,
    TELEGRAM_BOT_TOKEN,
    TELEGRAM_CHAT_ID,
    TIMEZONE,
)
from handlers import CATALOG_KEY, HTTP_CLIENT_KEY, ROUTER_KEY
from handlers.error_handler import error_handler
from handlers.job_handler import send_daily_briefing
from handlers.news_handler import (
    handle_callback_query,
    handle_text_message,
    news_command,
    quote_command,
    weather_command,
)
from handlers.start_handler import help_command, myid_command, start_command
from providers.http import create_http_client
from providers.news_api import NewsApiClient
from providers.quotes_api import QuoteClient
from providers.weather_api import WeatherClient
from repositories.news_catalog import NewsCatalog
from services.daily_job import DailyBriefingJob
from services.news_service import NewsService
from services.quote_service import QuoteService
from services.router import UpdateRouter
from services.weather_service import WeatherService
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "🚀 Start the bot"),
        BotCommand("news", "📰 Top headlines"),
        BotCommand("weather", "🌤 Current weather"),
        BotCommand("quote", "💬 Quote of the day"),
        BotCommand("help", "📖 Show help"),
        BotCommand("myid", "🆔 Your user and chat ID"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def shutdown(application: Application) -> None:
    """Release the HTTP client and drop the catalog."""
    await application.bot_data[HTTP_CLIENT_KEY].aclose()
    application.bot_data[CATALOG_KEY].clear()
    logger.info("HTTP client closed.")


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Core objects ───────────────────────────────────
    http = create_http_client()
    catalog = NewsCatalog()
    news_service = NewsService(catalog, NewsApiClient(http))
    weather_service = WeatherService(WeatherClient(http))
    quote_service = QuoteService(QuoteClient(http))
    router = UpdateRouter(news_service, weather_service, quote_service)

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = (
        Application.builder()
        .token(TELEGRAM_BOT_TOKEN)
        .concurrent_updates(True)
        .post_init(set_bot_commands)
        .post_shutdown(shutdown)
        .build()
    )
    app.bot_data[ROUTER_KEY] = router
    app.bot_data[CATALOG_KEY] = catalog
    app.bot_data[HTTP_CLIENT_KEY] = http

    # ── 3. Register command handlers ──────────────────────
    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("myid", myid_command))
    app.add_handler(CommandHandler("news", news_command))
    app.add_handler(CommandHandler("weather", weather_command))
    app.add_handler(CommandHandler("quote", quote_command))

    # ── 4. Register button taps and menu text (catch-all) ─
    app.add_handler(CallbackQueryHandler(handle_callback_query))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text_message))
    app.add_error_handler(error_handler)

    # ── 5. Schedule the daily briefing ────────────────────
    job_queue = app.job_queue
    if job_queue and TELEGRAM_CHAT_ID:
        daily_job = DailyBriefingJob(TELEGRAM_CHAT_ID, news_service, weather_service, quote_service)
        job_queue.run_daily(
            send_daily_briefing,
            time=dt_time(hour=DAILY_JOB_HOUR, minute=DAILY_JOB_MINUTE, tzinfo=ZoneInfo(TIMEZONE)),
            data=daily_job,
            name="daily_briefing",
        )
        logger.info(f"Scheduled daily briefing at {DAILY_JOB_HOUR:02d}:{DAILY_JOB_MINUTE:02d} {TIMEZONE}")
    else:
        logger.warning("Daily briefing disabled (no job queue or TELEGRAM_CHAT_ID not set).")

    # ── 6. Start polling ──────────────────────────────────
    logger.info("🚀 NewsBot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message", "callback_query"])
    logger.info("NewsBot stopped.")


if __name__ == "__main__":
    main()
