"""
handlers/start_handler.py
--------------------------
Handles /start, /help and /myid commands.
Shows the main menu and the country picker.
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
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show the menu keyboard and the country picker."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")

    messages = await context.bot_data[ROUTER_KEY].on_start()
    await send_messages(context.bot, update.effective_chat.id, messages)


@authorized_only
@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    messages = await context.bot_data[ROUTER_KEY].on_help()
    await send_messages(context.bot, update.effective_chat.id, messages)


@authorized_only
async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show the user and chat IDs for configuration."""
    user = update.effective_user
    chat = update.effective_chat
    await update.message.reply_text(
        f"🆔 Your user ID: `{user.id}`\n"
        f"💬 This chat ID: `{chat.id}`\n"
        f"Put them in `ALLOWED_USER_IDS` / `TELEGRAM_CHAT_ID` in your `.env` file.",
        parse_mode="Markdown",
    )
