"""Tests for the Telegram-facing layer: sending, handlers and the daily job."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest
from telegram import InlineKeyboardMarkup, ReplyKeyboardMarkup
from telegram.error import BadRequest

from handlers import ROUTER_KEY
from handlers import job_handler
from handlers.job_handler import run_daily_job, send_daily_briefing
from handlers.news_handler import handle_callback_query, handle_text_message, weather_command
from handlers.sender import build_markup, send_messages
from handlers.start_handler import start_command
from models.outbound import Button, OutboundMessage
from security import auth, rate_limiter
from services.daily_job import DailyBriefingJob
from services.news_service import NewsService
from services.quote_service import QuoteService
from services.weather_service import WeatherService
from tests.fakes import FakeBot, FakeNewsClient, FakeQuoteClient, FakeWeatherClient, make_articles


class FakeQuery:
    def __init__(self, data):
        self.data = data
        self.answers = []

    async def answer(self, text=None, show_alert=False):
        self.answers.append((text, show_alert))


class FakeMessage:
    def __init__(self, text=None):
        self.text = text
        self.replies = []

    async def reply_text(self, text, **kwargs):
        self.replies.append(text)


def make_update(text=None, callback_data=None, user_id=42, chat_id=1001):
    message = FakeMessage(text)
    query = FakeQuery(callback_data) if callback_data is not None else None
    return SimpleNamespace(
        effective_user=SimpleNamespace(id=user_id, username="tester", first_name="Test"),
        effective_chat=SimpleNamespace(id=chat_id),
        effective_message=message,
        message=message,
        callback_query=query,
    )


def make_context(router, bot, args=None):
    return SimpleNamespace(bot=bot, bot_data={ROUTER_KEY: router}, args=args or [])


# ── sender ────────────────────────────────────────────────

def test_build_markup_inline_keyboard():
    markup = build_markup(OutboundMessage(text="x", buttons=[[Button("Story 1", "news:1")]]))

    assert isinstance(markup, InlineKeyboardMarkup)
    assert markup.inline_keyboard[0][0].callback_data == "news:1"


def test_build_markup_reply_menu():
    markup = build_markup(OutboundMessage(text="x", menu=[["🆕 Start"]]))

    assert isinstance(markup, ReplyKeyboardMarkup)
    assert markup.resize_keyboard is True


def test_build_markup_plain_text():
    assert build_markup(OutboundMessage(text="x")) is None


def test_photo_message_is_sent_as_photo():
    bot = FakeBot()
    message = OutboundMessage(text="caption", photo_url="https://example.com/a.jpg", parse_mode="Markdown")

    asyncio.run(send_messages(bot, 7, [message]))

    assert bot.sent[0]["method"] == "send_photo"
    assert bot.sent[0]["caption"] == "caption"
    assert bot.sent[0]["chat_id"] == 7


def test_rejected_photo_falls_back_to_text():
    bot = FakeBot(reject_photos=True)
    message = OutboundMessage(text="caption", photo_url="https://broken.example/a.jpg", parse_mode="Markdown")

    asyncio.run(send_messages(bot, 7, [message]))

    assert [call["method"] for call in bot.sent] == ["send_message"]
    assert bot.sent[0]["text"] == "caption"
    assert bot.sent[0]["parse_mode"] == "Markdown"


def test_unparseable_markdown_is_resent_as_plain_text():
    bot = FakeBot(reject_markdown=True)
    message = OutboundMessage(text="📰 *Broken_title", parse_mode="Markdown")

    asyncio.run(send_messages(bot, 7, [message]))

    assert len(bot.sent) == 1
    assert bot.sent[0]["text"] == "📰 *Broken_title"
    assert "parse_mode" not in bot.sent[0]


def test_rejected_photo_with_unparseable_caption_ends_as_plain_text():
    bot = FakeBot(reject_photos=True, reject_markdown=True)
    message = OutboundMessage(text="*caption", photo_url="https://broken.example/a.jpg", parse_mode="Markdown")

    asyncio.run(send_messages(bot, 7, [message]))

    assert [call["method"] for call in bot.sent] == ["send_message"]
    assert "parse_mode" not in bot.sent[0]


def test_other_bad_requests_propagate():
    class ChatGoneBot(FakeBot):
        async def send_message(self, **kwargs):
            raise BadRequest("Chat not found")

    with pytest.raises(BadRequest):
        asyncio.run(send_messages(ChatGoneBot(), 7, [OutboundMessage(text="hi", parse_mode="Markdown")]))


def test_messages_are_sent_in_order():
    bot = FakeBot()

    asyncio.run(send_messages(bot, 7, [OutboundMessage(text="one"), OutboundMessage(text="two")]))

    assert [call["text"] for call in bot.sent] == ["one", "two"]


# ── handlers ──────────────────────────────────────────────

def test_start_command_sends_two_messages(router):
    bot = FakeBot()

    asyncio.run(start_command(make_update(text="/start"), make_context(router, bot)))

    assert len(bot.sent) == 2
    assert isinstance(bot.sent[0]["reply_markup"], ReplyKeyboardMarkup)
    assert isinstance(bot.sent[1]["reply_markup"], InlineKeyboardMarkup)
    assert all(call["chat_id"] == 1001 for call in bot.sent)


def test_callback_query_is_answered_and_routed(router, news_client):
    bot = FakeBot()
    update = make_update(callback_data="country:Germany")

    asyncio.run(handle_callback_query(update, make_context(router, bot)))

    assert update.callback_query.answers == [(None, False)]
    assert news_client.queries == [("everything", "germany")]
    assert len(bot.sent) == 1


def test_unknown_country_tap_sends_nothing(router):
    bot = FakeBot()
    update = make_update(callback_data="country:Narnia")

    asyncio.run(handle_callback_query(update, make_context(router, bot)))

    assert bot.sent == []
    assert update.callback_query.answers == [(None, False)]


def test_menu_text_is_routed(router):
    bot = FakeBot()

    asyncio.run(handle_text_message(make_update(text="💬 Quote"), make_context(router, bot)))

    assert "Aristotle" in bot.sent[0]["text"]


def test_weather_command_passes_city(router, weather_client):
    bot = FakeBot()

    asyncio.run(weather_command(make_update(text="/weather New York"), make_context(router, bot, args=["New", "York"])))

    assert weather_client.cities == ["New York"]


def test_unauthorized_tap_gets_alert(router, monkeypatch):
    monkeypatch.setattr(auth, "ALLOWED_USER_IDS", [1])
    bot = FakeBot()
    update = make_update(callback_data="news:1", user_id=999)

    asyncio.run(handle_callback_query(update, make_context(router, bot)))

    assert bot.sent == []
    assert update.callback_query.answers[0][1] is True


def test_unauthorized_message_gets_reply(router, monkeypatch):
    monkeypatch.setattr(auth, "ALLOWED_USER_IDS", [1])
    bot = FakeBot()
    update = make_update(text="/start", user_id=999)

    asyncio.run(start_command(update, make_context(router, bot)))

    assert bot.sent == []
    assert len(update.message.replies) == 1


def test_rate_limited_user_is_blocked(router, monkeypatch):
    monkeypatch.setattr(rate_limiter, "RATE_LIMIT_MESSAGES", 2)
    bot = FakeBot()
    updates = [make_update(text="💬 Quote") for _ in range(3)]

    for update in updates:
        asyncio.run(handle_text_message(update, make_context(router, bot)))

    assert len(bot.sent) == 2
    assert len(updates[2].message.replies) == 1


# ── daily job ─────────────────────────────────────────────

def _job(catalog, news_client=None, weather_client=None, quote_client=None) -> DailyBriefingJob:
    return DailyBriefingJob(
        chat_id=555,
        news=NewsService(catalog, news_client or FakeNewsClient()),
        weather=WeatherService(weather_client or FakeWeatherClient()),
        quotes=QuoteService(quote_client or FakeQuoteClient()),
    )


def test_daily_job_sends_one_composed_message(catalog):
    bot = FakeBot()

    asyncio.run(run_daily_job(_job(catalog), bot))

    assert len(bot.sent) == 1
    sent = bot.sent[0]
    assert sent["chat_id"] == 555
    assert "Good morning" in sent["text"]
    assert isinstance(sent["reply_markup"], InlineKeyboardMarkup)
    assert len(catalog) == 10


def test_daily_job_with_all_providers_down_sends_nothing(catalog, transport_failure):
    bot = FakeBot()
    job = _job(
        catalog,
        news_client=FakeNewsClient(error=transport_failure),
        weather_client=FakeWeatherClient(error=transport_failure),
        quote_client=FakeQuoteClient(error=transport_failure),
    )

    asyncio.run(run_daily_job(job, bot))

    assert bot.sent == []


def test_daily_job_leaves_out_stale_news_when_headlines_fail(catalog, transport_failure):
    catalog.replace(make_articles(3, prefix="Germany"), label="Germany")
    job = _job(catalog, news_client=FakeNewsClient(error=transport_failure))

    message = asyncio.run(job.build())

    assert "Today's headlines" not in message.text
    assert message.buttons == []
    assert "Chisinau" in message.text
    assert [item.title for item in catalog.items] == ["Germany 1", "Germany 2", "Germany 3"]


def test_daily_job_swallows_send_failures(catalog):
    class BrokenBot(FakeBot):
        async def send_message(self, **kwargs):
            raise RuntimeError("network down")

    asyncio.run(run_daily_job(_job(catalog), BrokenBot()))


def test_daily_job_can_run_twice(catalog):
    bot = FakeBot()
    job = _job(catalog)

    asyncio.run(run_daily_job(job, bot))
    asyncio.run(run_daily_job(job, bot))

    assert len(bot.sent) == 2
    assert [item.id for item in catalog.items] == list(range(1, 11))


def test_scheduled_callback_uses_job_data(catalog, monkeypatch):
    calls = []

    async def fake_run(job, bot):
        calls.append((job, bot))

    monkeypatch.setattr(job_handler, "run_daily_job", fake_run)
    job = _job(catalog)
    bot = FakeBot()
    context = SimpleNamespace(job=SimpleNamespace(data=job), bot=bot)

    asyncio.run(send_daily_briefing(context))

    assert calls == [(job, bot)]
