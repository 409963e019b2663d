"""
services/quote_service.py
-------------------------
Business logic for fetching the motivational quote of the day.
"""

from typing import Optional

from models.quote import Quote
from providers.exceptions import ProviderError
from providers.quotes_api import QuoteClient
from utils.logger import get_logger

logger = get_logger(__name__)


class QuoteService:
    def __init__(self, client: QuoteClient):
        self.client = client

    async def get_quote(self) -> Optional[Quote]:
        """Return a quote, or None if the provider failed or had nothing."""
        try:
            quote = await self.client.random()
        except ProviderError as e:
            logger.error(f"Failed to fetch quote: {e}")
            return None
        if quote is None:
            logger.info("Quotes API returned an empty list.")
        return quote
