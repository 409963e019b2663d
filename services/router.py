"""
services/router.py
------------------
Maps incoming chat events to actions and outbound messages.

The router is stateless between calls: every piece of state it touches
lives in the NewsCatalog behind NewsService. Each public coroutine takes
the event payload and returns the list of messages to send (possibly
empty). Provider failures never escape; they become user-facing text.

    /start, "🆕 Start"       → welcome menu + country picker
    /news, "📰 News"          → refresh top headlines, first page
    /weather, "🌤 Weather"    → current weather
    /quote, "💬 Quote"        → quote of the day
    country:<name>           → refresh for that country, first page
    news:<id>                → detail view of one item
    more:<offset>            → page at offset
"""

import re
from typing import Optional

from models.callback import (
    CountryToken,
    InvalidToken,
    MoreToken,
    NewsDetailToken,
    parse_token,
)
from models.country import CountrySelection, DEFAULT_COUNTRIES
from models.outbound import OutboundMessage
from services import message_builder as mb
from services.news_service import NewsService
from services.quote_service import QuoteService
from services.weather_service import WeatherService
from utils.logger import get_logger

logger = get_logger(__name__)

# Strips the emoji prefix of reply-keyboard labels: "📰 News" → "news"
_MENU_PREFIX = re.compile(r"^[^\w/]+")


def _normalize_menu_text(text: str) -> str:
    return _MENU_PREFIX.sub("", text.strip()).strip().lower()


class UpdateRouter:
    """
    Dispatches commands, menu text and callback taps.

    Args:
        news: Service backed by the single process-wide catalog.
        weather: Weather lookups.
        quotes: Quote lookups.
        countries: The fixed country picker table.
    """

    def __init__(
        self,
        news: NewsService,
        weather: WeatherService,
        quotes: QuoteService,
        countries: CountrySelection = DEFAULT_COUNTRIES,
    ):
        self.news = news
        self.weather = weather
        self.quotes = quotes
        self.countries = countries
        self._menu_actions = {
            "start": self.on_start,
            "news": self.on_news,
            "weather": self.on_weather,
            "quote": self.on_quote,
            "help": self.on_help,
        }

    # ── Commands & menu text ───────────────────────────────

    async def on_start(self) -> list[OutboundMessage]:
        return mb.welcome_messages(self.countries)

    async def on_help(self) -> list[OutboundMessage]:
        return [OutboundMessage(text=mb.HELP_TEXT, parse_mode=mb.MARKDOWN)]

    async def on_news(self) -> list[OutboundMessage]:
        """Refresh the catalog with top headlines and show the first page."""
        if not await self.news.refresh_top_headlines():
            return [OutboundMessage(text=mb.NO_NEWS_TEXT)]
        return [mb.news_page(self.news.get_page(0))]

    async def on_weather(self, city: Optional[str] = None) -> list[OutboundMessage]:
        report = await self.weather.get_report(city)
        return [mb.weather_message(report)]

    async def on_quote(self) -> list[OutboundMessage]:
        quote = await self.quotes.get_quote()
        return [mb.quote_message(quote)]

    async def on_text(self, text: Optional[str]) -> list[OutboundMessage]:
        """
        Handle a plain text message, typically a reply-keyboard tap.

        Unrecognized text gets a short hint; empty text gets nothing.
        """
        if not text or not text.strip():
            return []
        action = self._menu_actions.get(_normalize_menu_text(text))
        if action is None:
            return [OutboundMessage(text=mb.UNKNOWN_TEXT, menu=mb.MAIN_MENU)]
        return await action()

    # ── Callback taps ─────────────────────────────────────

    async def on_callback(self, data: Optional[str]) -> list[OutboundMessage]:
        """
        Handle an inline button tap.

        Unknown payload kinds and malformed payloads produce no messages.
        """
        try:
            token = parse_token(data)
        except InvalidToken as e:
            logger.warning(f"Rejected callback payload: {e}")
            return []

        if isinstance(token, CountryToken):
            return await self._select_country(token.name)
        if isinstance(token, NewsDetailToken):
            return [mb.news_detail(self.news.get_item(token.news_id))]
        if isinstance(token, MoreToken):
            return [mb.news_page(self.news.get_page(token.offset))]

        logger.debug(f"Ignoring callback with unknown payload: {data!r}")
        return []

    async def _select_country(self, name: str) -> list[OutboundMessage]:
        code = self.countries.resolve(name)
        if code is None:
            logger.warning(f"Unknown country in callback: {name!r}")
            return []

        if not await self.news.refresh_for_country(name, code):
            return [OutboundMessage(text=mb.NO_NEWS_TEXT)]
        return [mb.news_page(self.news.get_page(0))]
