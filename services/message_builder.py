"""
services/message_builder.py
---------------------------
Renders domain objects into OutboundMessage descriptions.

All user-facing text lives here. Nothing in this module talks to
Telegram or to a provider.
"""

from typing import Optional

from telegram.helpers import escape_markdown

from models.callback import CountryToken, MoreToken, NewsDetailToken
from models.country import CountrySelection
from models.news import NewsItem, NewsPage
from models.outbound import Button, OutboundMessage
from models.quote import Quote
from models.weather import WeatherReport

MARKDOWN = "Markdown"

# Telegram limits
_CAPTION_LIMIT = 1024
_BUTTON_LABEL_LIMIT = 60
_TITLE_LIMIT = 256

# ── Reply keyboard menu ───────────────────────────────────
MENU_START = "🆕 Start"
MENU_NEWS = "📰 News"
MENU_WEATHER = "🌤 Weather"
MENU_QUOTE = "💬 Quote"
MAIN_MENU = [[MENU_START], [MENU_NEWS, MENU_WEATHER, MENU_QUOTE]]

NO_NEWS_TEXT = "❌ No news available."
NO_MORE_NEWS_TEXT = "📭 No more news."
NEWS_NOT_FOUND_TEXT = "❌ News item not found."
WEATHER_UNAVAILABLE_TEXT = "❌ Weather is unavailable right now. Try again later."
NO_QUOTE_TEXT = "❌ No quote available right now."
MORE_NEWS_LABEL = "➡ More News"

HELP_TEXT = (
    "🤖 *NewsBot*\n\n"
    "*Commands:*\n"
    "/start - show the menu and pick a country\n"
    "/news - top headlines\n"
    "/weather `city` - current weather (city optional)\n"
    "/quote - quote of the day\n"
    "/help - this message\n\n"
    "Tap a headline to read it, or *➡ More News* for the next page."
)

UNKNOWN_TEXT = "🤔 I didn't get that. Use the menu below or /help."


def _truncate(text: str, limit: int) -> str:
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def _escaped_within(text: str, limit: int) -> str:
    """Markdown-escape ``text``, trimming it first so the escaped form fits ``limit``."""
    if limit <= 0:
        return ""
    cut = limit
    while True:
        escaped = escape_markdown(_truncate(text, cut), version=1)
        if len(escaped) <= limit:
            return escaped
        # each trimmed character shortens the escaped text by one or two
        cut -= (len(escaped) - limit + 1) // 2


def welcome_messages(countries: CountrySelection) -> list[OutboundMessage]:
    """The two /start messages: menu keyboard, then the country picker."""
    return [
        OutboundMessage(
            text="Welcome! Use the buttons below to get started:",
            menu=MAIN_MENU,
        ),
        country_picker(countries),
    ]


def country_picker(countries: CountrySelection) -> OutboundMessage:
    rows = [
        [Button(name, CountryToken(name).encode())]
        for name in countries.names()
    ]
    return OutboundMessage(text="Please choose a country to get news from:", buttons=rows)


def page_buttons(page: NewsPage) -> list[list[Button]]:
    """One row per headline, plus a "more" row when another page follows."""
    rows = [
        [Button(_truncate(item.title or f"News #{item.id}", _BUTTON_LABEL_LIMIT),
                NewsDetailToken(item.id).encode())]
        for item in page.items
    ]
    if page.has_more:
        rows.append([Button(MORE_NEWS_LABEL, MoreToken(page.next_offset).encode())])
    return rows


def news_page(page: Optional[NewsPage]) -> OutboundMessage:
    """
    Render a catalog page.

    Args:
        page: The page, or None if the catalog is empty.
    """
    if page is None:
        return OutboundMessage(text=NO_NEWS_TEXT)
    if not page.items:
        return OutboundMessage(text=NO_MORE_NEWS_TEXT)

    header = "📰 Latest News"
    if page.label:
        header += f" ({page.label})"
    first, last = page.offset + 1, page.offset + len(page.items)
    return OutboundMessage(
        text=f"{header}: {first}-{last} of {page.total}",
        buttons=page_buttons(page),
    )


def news_detail(item: Optional[NewsItem]) -> OutboundMessage:
    """Render a single news item as a photo with a Markdown caption."""
    if item is None:
        return OutboundMessage(text=NEWS_NOT_FOUND_TEXT)

    header = f"📰 *{_escaped_within(item.title, _TITLE_LIMIT)}*"
    link = f"🔗 [Read More]({item.url})" if item.url else ""
    if len(header) + len(link) + 2 > _CAPTION_LIMIT:
        link = ""
    # Two separators of "\n\n" around the description
    budget = _CAPTION_LIMIT - len(header) - len(link) - 4
    description = _escaped_within(item.description, budget)

    caption = "\n\n".join(part for part in (header, description, link) if part)
    return OutboundMessage(
        text=caption,
        photo_url=item.image_url or None,
        parse_mode=MARKDOWN,
    )


def weather_text(report: WeatherReport) -> str:
    return (
        f"🌤 *Weather in {escape_markdown(report.city, version=1)}*\n"
        f"  {report.description.capitalize()}\n"
        f"  🌡 {report.temp:.1f}°C (min {report.temp_min:.1f}°C, max {report.temp_max:.1f}°C)\n"
        f"  💧 Humidity: {report.humidity}%\n"
        f"  💨 Wind: {report.wind_speed:.1f} m/s"
    )


def weather_message(report: Optional[WeatherReport]) -> OutboundMessage:
    if report is None:
        return OutboundMessage(text=WEATHER_UNAVAILABLE_TEXT)
    return OutboundMessage(text=weather_text(report), parse_mode=MARKDOWN)


def quote_text(quote: Quote) -> str:
    return (
        f"💬 _{escape_markdown(quote.text, version=1)}_\n"
        f"  - {escape_markdown(quote.author, version=1)}"
    )


def quote_message(quote: Optional[Quote]) -> OutboundMessage:
    if quote is None:
        return OutboundMessage(text=NO_QUOTE_TEXT)
    return OutboundMessage(text=quote_text(quote), parse_mode=MARKDOWN)


def daily_briefing(
    report: Optional[WeatherReport],
    quote: Optional[Quote],
    page: Optional[NewsPage],
) -> Optional[OutboundMessage]:
    """
    Compose the good-morning message sent by the daily job.

    Sections whose data is missing are left out. Returns None when there
    is nothing at all to send.
    """
    has_news = page is not None and bool(page.items)
    if report is None and quote is None and not has_news:
        return None

    sections = ["☀️ *Good morning!*"]
    if report is not None:
        sections.append(weather_text(report))
    if quote is not None:
        sections.append(quote_text(quote))
    if has_news:
        sections.append(f"📰 *Today's headlines* ({page.total}):")

    return OutboundMessage(
        text="\n\n".join(sections),
        buttons=page_buttons(page) if has_news else [],
        parse_mode=MARKDOWN,
    )
