"""
providers/weather_api.py
------------------------
OpenWeatherMap current-weather client.
"""

import httpx

from config import WEATHER_API_KEY, WEATHER_API_URL
from models.weather import WeatherReport
from providers.adapters import parse_weather
from providers.http import get_json


class WeatherClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str = WEATHER_API_KEY,
        url: str = WEATHER_API_URL,
    ):
        self.http = http
        self.api_key = api_key
        self.url = url

    async def current(self, city: str) -> WeatherReport:
        """Current conditions for ``city`` in metric units."""
        payload = await get_json(
            self.http,
            self.url,
            params={"q": city, "units": "metric", "appid": self.api_key},
            provider="openweathermap",
        )
        return parse_weather(payload, city)
