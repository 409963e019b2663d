"""
services/daily_job.py
---------------------
The scheduled good-morning briefing.

Policy: every run fetches everything fresh. Top headlines replace the
catalog (when the fetch succeeds), then weather and a quote are fetched
and ONE composed message is sent to the configured chat, with the first
catalog page attached as its inline keyboard. Running it more than once
a day just sends another briefing. If the headline fetch fails the
briefing goes out without a news section.
"""

import asyncio
from typing import Optional

from models.outbound import OutboundMessage
from services import message_builder as mb
from services.news_service import NewsService
from services.quote_service import QuoteService
from services.weather_service import WeatherService


class DailyBriefingJob:
    """
    Composes the daily briefing for one chat.

    Sending is done by handlers/job_handler.py, which owns the
    never-raise boundary towards the scheduler.
    """

    def __init__(
        self,
        chat_id: int,
        news: NewsService,
        weather: WeatherService,
        quotes: QuoteService,
    ):
        self.chat_id = chat_id
        self.news = news
        self.weather = weather
        self.quotes = quotes

    async def build(self) -> Optional[OutboundMessage]:
        """
        Fetch all sources concurrently and compose the briefing.

        Returns:
            The message, or None if every source came back empty.
        """
        refreshed, report, quote = await asyncio.gather(
            self.news.refresh_top_headlines(),
            self.weather.get_report(),
            self.quotes.get_quote(),
        )
        # A failed refresh leaves older news in the catalog; keep it out
        page = self.news.get_page(0) if refreshed else None
        return mb.daily_briefing(report, quote, page)
