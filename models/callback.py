"""
models/callback.py
------------------
Callback tokens carried by inline keyboard buttons.

A token is rendered into the button's ``callback_data`` string when a
message is built, and parsed back exactly once when Telegram re-delivers
the tap. Wire format: ``<kind>:<argument>``.

    country:<name>   → CountryToken
    news:<id>        → NewsDetailToken
    more:<offset>    → MoreToken

Tokens are not signed; anyone who can craft the string can trigger the
corresponding action.
"""

from dataclasses import dataclass
from typing import Optional, Union

SEPARATOR = ":"


class InvalidToken(ValueError):
    """Raised when a callback payload has a known kind but a malformed argument."""


@dataclass(frozen=True)
class CountryToken:
    name: str

    kind = "country"

    def encode(self) -> str:
        return f"{self.kind}{SEPARATOR}{self.name}"


@dataclass(frozen=True)
class NewsDetailToken:
    news_id: int

    kind = "news"

    def encode(self) -> str:
        return f"{self.kind}{SEPARATOR}{self.news_id}"


@dataclass(frozen=True)
class MoreToken:
    offset: int

    kind = "more"

    def encode(self) -> str:
        return f"{self.kind}{SEPARATOR}{self.offset}"


CallbackToken = Union[CountryToken, NewsDetailToken, MoreToken]


def _parse_int(raw: str, data: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidToken(f"Expected an integer in callback payload {data!r}") from None


def parse_token(data: Optional[str]) -> Optional[CallbackToken]:
    """
    Parse a callback payload into a token.

    Args:
        data: The raw ``callback_data`` string.

    Returns:
        The parsed token, or None if the payload kind is unknown
        (such payloads are ignored by the router).

    Raises:
        InvalidToken: If the kind is known but its argument is malformed.
    """
    if not data or SEPARATOR not in data:
        return None

    kind, _, arg = data.partition(SEPARATOR)

    if kind == CountryToken.kind:
        if not arg:
            raise InvalidToken(f"Empty country name in callback payload {data!r}")
        return CountryToken(arg)

    if kind == NewsDetailToken.kind:
        news_id = _parse_int(arg, data)
        if news_id < 1:
            raise InvalidToken(f"News id must be positive, got {news_id}")
        return NewsDetailToken(news_id)

    if kind == MoreToken.kind:
        offset = _parse_int(arg, data)
        if offset < 0:
            raise InvalidToken(f"Offset must be non-negative, got {offset}")
        return MoreToken(offset)

    return None
