"""
handlers/news_handler.py
------------------------
Handles news, weather and quote commands, reply-keyboard text and
inline button taps. Delegates every decision to the UpdateRouter.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers import ROUTER_KEY
from handlers.sender import send_messages
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
async def news_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /news command - fetch top headlines and show the first page."""
    messages = await context.bot_data[ROUTER_KEY].on_news()
    await send_messages(context.bot, update.effective_chat.id, messages)


@authorized_only
@rate_limited
async def weather_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /weather command - current weather.

    Usage:
        /weather          → configured default city
        /weather Berlin   → any city
    """
    city = " ".join(context.args) if context.args else None
    messages = await context.bot_data[ROUTER_KEY].on_weather(city)
    await send_messages(context.bot, update.effective_chat.id, messages)


@authorized_only
@rate_limited
async def quote_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /quote command - quote of the day."""
    messages = await context.bot_data[ROUTER_KEY].on_quote()
    await send_messages(context.bot, update.effective_chat.id, messages)


@authorized_only
@rate_limited
async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any plain text message (not a command), usually a menu button."""
    messages = await context.bot_data[ROUTER_KEY].on_text(update.message.text)
    await send_messages(context.bot, update.effective_chat.id, messages)


@authorized_only
@rate_limited
async def handle_callback_query(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle an inline button tap (country, news item or "more")."""
    query = update.callback_query
    # Stops the loading spinner on the button
    await query.answer()

    logger.info(f"Callback from user {update.effective_user.id}: {query.data!r}")
    messages = await context.bot_data[ROUTER_KEY].on_callback(query.data)
    await send_messages(context.bot, update.effective_chat.id, messages)
