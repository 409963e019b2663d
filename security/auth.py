"""
security/auth.py
-----------------
Authentication middleware for the Telegram bot.
Blocks any user not in the allowed whitelist.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import ALLOWED_USER_IDS
from utils.logger import get_logger

logger = get_logger(__name__)


async def notify_user(update: Update, text: str) -> None:
    """
    Tell the user why their update was dropped.

    Button taps get a popup alert; messages get a reply.
    """
    if update.callback_query:
        await update.callback_query.answer(text, show_alert=True)
    elif update.effective_message:
        await update.effective_message.reply_text(text)


def is_allowed(user_id: int) -> bool:
    """An empty whitelist allows everyone (dev mode)."""
    return not ALLOWED_USER_IDS or user_id in ALLOWED_USER_IDS


def authorized_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted users only.

    Usage:
        @authorized_only
        async def my_handler(update, context):
            ...

    Behavior:
        - If ALLOWED_USER_IDS is empty, ALL users are allowed (dev mode).
        - If the list is set, only those users can use the bot.
        - Applies to commands, text and button taps alike.
        - Unauthorized attempts are logged.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if is_allowed(user.id):
            return await func(update, context, *args, **kwargs)

        logger.warning(
            f"🚫 Unauthorized access attempt: user_id={user.id}, "
            f"username={user.username}, name={user.first_name}"
        )
        await notify_user(update, "⛔ Sorry, this bot is private.")

    return wrapper
