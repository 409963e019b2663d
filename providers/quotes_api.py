"""
providers/quotes_api.py
-----------------------
Client for a ZenQuotes-compatible endpoint (JSON array of ``{q, a}``).
"""

from typing import Optional

import httpx

from config import QUOTES_API_URL
from models.quote import Quote
from providers.adapters import parse_quote
from providers.http import get_json


class QuoteClient:
    def __init__(self, http: httpx.AsyncClient, url: str = QUOTES_API_URL):
        self.http = http
        self.url = url

    async def random(self) -> Optional[Quote]:
        """Fetch one quote; None if the endpoint returned an empty array."""
        payload = await get_json(self.http, self.url, provider="quotes")
        return parse_quote(payload)
