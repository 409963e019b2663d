"""
handlers/sender.py
------------------
Turns OutboundMessage descriptions into Telegram Bot API calls.
"""

from typing import Iterable, Optional

from telegram import (
    Bot,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
)
from telegram.error import BadRequest

from models.outbound import OutboundMessage
from utils.logger import get_logger

logger = get_logger(__name__)


def build_markup(message: OutboundMessage):
    """Inline keyboard if the message has buttons, else the reply menu, else None."""
    if message.buttons:
        return InlineKeyboardMarkup([
            [InlineKeyboardButton(b.label, callback_data=b.callback_data) for b in row]
            for row in message.buttons
        ])
    if message.menu:
        return ReplyKeyboardMarkup(
            message.menu,
            resize_keyboard=True,
            one_time_keyboard=False,
        )
    return None


async def send_message(bot: Bot, chat_id: int, message: OutboundMessage) -> None:
    """
    Send one message.

    Photos that Telegram refuses (dead image link, unsupported format)
    are re-sent as a text message with the same caption. Text that
    Telegram cannot parse as Markdown is re-sent without formatting.
    """
    markup = build_markup(message)

    if message.is_photo:
        try:
            await bot.send_photo(
                chat_id=chat_id,
                photo=message.photo_url,
                caption=message.text,
                parse_mode=message.parse_mode,
                reply_markup=markup,
            )
            return
        except BadRequest as e:
            logger.warning(f"Photo rejected for chat {chat_id} ({e}); sending text instead.")

    try:
        await bot.send_message(
            chat_id=chat_id,
            text=message.text,
            parse_mode=message.parse_mode,
            reply_markup=markup,
        )
    except BadRequest as e:
        if not message.parse_mode or not _is_parse_error(e):
            raise
        logger.warning(f"Markdown rejected for chat {chat_id} ({e}); sending plain text.")
        await bot.send_message(chat_id=chat_id, text=message.text, reply_markup=markup)


def _is_parse_error(error: BadRequest) -> bool:
    return "can't parse entities" in error.message.lower()


async def send_messages(bot: Bot, chat_id: Optional[int], messages: Iterable[OutboundMessage]) -> None:
    """Send messages in order to one chat."""
    if chat_id is None:
        return
    for message in messages:
        await send_message(bot, chat_id, message)
