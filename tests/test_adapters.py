"""Tests for mapping provider JSON into domain models."""

from __future__ import annotations

import pytest

from providers.adapters import parse_articles, parse_quote, parse_weather
from providers.exceptions import MalformedRecord


def _article(**overrides):
    raw = {
        "source": {"id": None, "name": "Example"},
        "title": "Headline",
        "description": "Summary",
        "url": "https://example.com/a",
        "urlToImage": "https://example.com/a.jpg",
    }
    raw.update(overrides)
    return raw


def test_parse_articles_keeps_provider_order():
    payload = {"status": "ok", "articles": [_article(title="First"), _article(title="Second")]}

    articles = parse_articles(payload)

    assert [a.title for a in articles] == ["First", "Second"]
    assert articles[0].image_url == "https://example.com/a.jpg"


def test_parse_articles_without_articles_key_is_empty():
    assert parse_articles({"status": "ok", "totalResults": 0}) == []
    assert parse_articles([]) == []


def test_parse_articles_null_values_become_empty_strings():
    articles = parse_articles({"articles": [_article(description=None, urlToImage=None)]})

    assert articles[0].description == ""
    assert articles[0].image_url == ""


def test_parse_articles_missing_field_aborts_whole_batch():
    broken = _article()
    del broken["urlToImage"]

    with pytest.raises(MalformedRecord, match="urlToImage"):
        parse_articles({"articles": [_article(), broken, _article()]})


def test_parse_articles_rejects_non_object_element():
    with pytest.raises(MalformedRecord):
        parse_articles({"articles": [_article(), "oops"]})


def _weather_payload():
    return {
        "name": "Chisinau",
        "weather": [{"main": "Rain", "description": "light rain"}],
        "main": {"temp": 12.3, "temp_min": 10, "temp_max": 14.5, "humidity": 81},
        "wind": {"speed": 3.6},
    }


def test_parse_weather():
    report = parse_weather(_weather_payload(), "chisinau")

    assert report.city == "Chisinau"
    assert report.description == "light rain"
    assert report.temp == 12.3
    assert report.temp_min == 10.0
    assert report.humidity == 81
    assert report.wind_speed == 3.6


@pytest.mark.parametrize(
    "path",
    [("weather",), ("main", "temp_max"), ("main", "humidity"), ("wind", "speed"), ("wind",)],
)
def test_parse_weather_missing_path_is_malformed(path):
    payload = _weather_payload()
    node = payload
    for key in path[:-1]:
        node = node[key]
    del node[path[-1]]

    with pytest.raises(MalformedRecord):
        parse_weather(payload, "Chisinau")


def test_parse_weather_empty_conditions_list_is_malformed():
    payload = _weather_payload()
    payload["weather"] = []

    with pytest.raises(MalformedRecord, match="weather.0.description"):
        parse_weather(payload, "Chisinau")


def test_parse_quote_takes_first_element():
    quote = parse_quote([{"q": "Stay hungry.", "a": "Steve Jobs", "h": "<p>"}, {"q": "x", "a": "y"}])

    assert quote.text == "Stay hungry."
    assert quote.author == "Steve Jobs"


def test_parse_quote_empty_array_is_none():
    assert parse_quote([]) is None


def test_parse_quote_missing_author_is_malformed():
    with pytest.raises(MalformedRecord):
        parse_quote([{"q": "Anonymous wisdom"}])


def test_parse_quote_requires_array():
    with pytest.raises(MalformedRecord):
        parse_quote({"q": "x", "a": "y"})
