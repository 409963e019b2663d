"""
services/weather_service.py
---------------------------
Business logic for current-weather lookups.
"""

from typing import Optional

from config import WEATHER_CITY
from models.weather import WeatherReport
from providers.exceptions import ProviderError
from providers.weather_api import WeatherClient
from utils.logger import get_logger

logger = get_logger(__name__)


class WeatherService:
    def __init__(self, client: WeatherClient, default_city: str = WEATHER_CITY):
        self.client = client
        self.default_city = default_city

    async def get_report(self, city: Optional[str] = None) -> Optional[WeatherReport]:
        """
        Current weather for ``city`` (or the configured default).

        Returns:
            The report, or None if the provider failed.
        """
        city = (city or self.default_city).strip()
        try:
            report = await self.client.current(city)
        except ProviderError as e:
            logger.error(f"Failed to fetch weather for {city}: {e}")
            return None
        logger.info(f"Weather fetched: {report}")
        return report
