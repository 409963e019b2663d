"""
providers/news_api.py
---------------------
NewsAPI (https://newsapi.org) client.
"""

import httpx

from config import NEWS_API_BASE_URL, NEWS_API_KEY
from models.news import Article
from providers.adapters import parse_articles
from providers.http import get_json


class NewsApiClient:
    """
    Fetches articles from NewsAPI and maps them through the news adapter.

    Both methods raise TransportFailure / MalformedRecord on failure.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str = NEWS_API_KEY,
        base_url: str = NEWS_API_BASE_URL,
    ):
        self.http = http
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def everything(self, query: str) -> list[Article]:
        """Search all articles matching ``query`` (a country code from the picker)."""
        payload = await get_json(
            self.http,
            f"{self.base_url}/everything",
            params={"q": query, "apiKey": self.api_key},
            provider="newsapi",
        )
        return parse_articles(payload)

    async def top_headlines(self, country: str = "us") -> list[Article]:
        """Fetch the current top headlines for a country."""
        payload = await get_json(
            self.http,
            f"{self.base_url}/top-headlines",
            params={"country": country, "apiKey": self.api_key},
            provider="newsapi",
        )
        return parse_articles(payload)
