"""
handlers/error_handler.py
-------------------------
Last-resort error handler registered on the Application.
Anything a handler did not catch ends up here and is logged; the bot keeps running.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log the error and, when possible, tell the user something went wrong."""
    logger.error(f"Unhandled error while processing {update!r}", exc_info=context.error)

    if isinstance(update, Update) and update.effective_chat:
        try:
            await context.bot.send_message(
                chat_id=update.effective_chat.id,
                text="⚠️ Something went wrong. Please try again.",
            )
        except Exception as e:
            logger.error(f"Failed to notify chat about error: {e}")
