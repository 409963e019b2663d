"""
models/outbound.py
------------------
Transport-neutral description of a message the bot wants to send.
Services build these; handlers/sender.py turns them into Telegram calls.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Button:
    """An inline keyboard button carrying an encoded callback token."""
    label: str
    callback_data: str


@dataclass
class OutboundMessage:
    """
    A single outbound chat message.

    Attributes:
        text: Message text, or the photo caption when ``photo_url`` is set.
        buttons: Inline keyboard rows (empty = no inline keyboard).
        menu: Reply keyboard rows of button labels shown under the input field.
        photo_url: Send as a photo with ``text`` as its caption.
        parse_mode: Telegram parse mode for ``text`` (e.g. "Markdown").
    """
    text: str
    buttons: list[list[Button]] = field(default_factory=list)
    menu: Optional[list[list[str]]] = None
    photo_url: Optional[str] = None
    parse_mode: Optional[str] = None

    @property
    def is_photo(self) -> bool:
        return bool(self.photo_url)

    def callback_data(self) -> list[str]:
        """All callback payloads on this message, top to bottom."""
        return [button.callback_data for row in self.buttons for button in row]
