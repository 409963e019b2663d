"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from providers.exceptions import TransportFailure
from repositories.news_catalog import NewsCatalog
from security import rate_limiter
from services.news_service import NewsService
from services.quote_service import QuoteService
from services.router import UpdateRouter
from services.weather_service import WeatherService
from tests.fakes import FakeNewsClient, FakeQuoteClient, FakeWeatherClient


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def catalog() -> NewsCatalog:
    return NewsCatalog()


@pytest.fixture
def news_client() -> FakeNewsClient:
    return FakeNewsClient()


@pytest.fixture
def news_service(catalog, news_client) -> NewsService:
    return NewsService(catalog, news_client, page_size=7, headlines_country="us")


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest.fixture
def weather_service(weather_client) -> WeatherService:
    return WeatherService(weather_client, default_city="Chisinau")


@pytest.fixture
def quote_client() -> FakeQuoteClient:
    return FakeQuoteClient()


@pytest.fixture
def quote_service(quote_client) -> QuoteService:
    return QuoteService(quote_client)


@pytest.fixture
def router(news_service, weather_service, quote_service) -> UpdateRouter:
    return UpdateRouter(news_service, weather_service, quote_service)


@pytest.fixture
def transport_failure() -> TransportFailure:
    return TransportFailure("newsapi: HTTP 500 Internal Server Error", status_code=500)
