"""
services/news_service.py
------------------------
Business logic for fetching news into the catalog and reading it back.
Orchestrates between the NewsAPI client and the NewsCatalog.
"""

from typing import Optional

from config import NEWS_HEADLINES_COUNTRY, NEWS_PAGE_SIZE
from models.news import NewsItem, NewsPage
from providers.exceptions import ProviderError
from providers.news_api import NewsApiClient
from repositories.news_catalog import NewsCatalog
from utils.logger import get_logger

logger = get_logger(__name__)

TOP_HEADLINES_LABEL = "Top headlines"


class NewsService:
    """
    Handles all business logic related to news.

    Workflow:
        1. Fetch articles from NewsAPI.
        2. Replace the catalog only if the whole fetch succeeded.
        3. Serve pages and detail lookups from the catalog.

    A failed fetch (transport error or malformed response) leaves the
    catalog exactly as it was.
    """

    def __init__(
        self,
        catalog: NewsCatalog,
        client: NewsApiClient,
        page_size: int = NEWS_PAGE_SIZE,
        headlines_country: str = NEWS_HEADLINES_COUNTRY,
    ):
        self.catalog = catalog
        self.client = client
        self.page_size = page_size
        self.headlines_country = headlines_country

    async def refresh_for_country(self, name: str, code: str) -> bool:
        """
        Fetch news for a country and replace the catalog.

        Args:
            name: Display name (used as the catalog label).
            code: Query code sent to the provider.

        Returns:
            True if the catalog was replaced (possibly with zero items).
        """
        try:
            articles = await self.client.everything(code)
        except ProviderError as e:
            logger.error(f"Failed to fetch news for {name} ({code}): {e}")
            return False
        self.catalog.replace(articles, label=name)
        return True

    async def refresh_top_headlines(self) -> bool:
        """Fetch the top headlines and replace the catalog. True on success."""
        try:
            articles = await self.client.top_headlines(self.headlines_country)
        except ProviderError as e:
            logger.error(f"Failed to fetch top headlines: {e}")
            return False
        self.catalog.replace(articles, label=TOP_HEADLINES_LABEL)
        return True

    def get_page(self, offset: int = 0) -> Optional[NewsPage]:
        """Page of the catalog at ``offset``; None when there is no news at all."""
        return self.catalog.page(offset, self.page_size)

    def get_item(self, news_id: int) -> Optional[NewsItem]:
        return self.catalog.lookup(news_id)
