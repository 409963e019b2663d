"""
providers/adapters.py
---------------------
Pure mapping from decoded provider JSON to domain models.

No I/O happens here. Every function either returns a normalized record
or raises MalformedRecord; an empty result is a normal return value
(empty list / None), not an error.
"""

from typing import Any, Optional

from models.news import Article
from models.quote import Quote
from models.weather import WeatherReport
from providers.exceptions import MalformedRecord

_ARTICLE_FIELDS = ("title", "description", "url", "urlToImage")


def _text(value: Any) -> str:
    """NewsAPI sends JSON null for absent descriptions and images."""
    return "" if value is None else str(value)


def _path(payload: Any, *keys) -> Any:
    """Walk nested dicts/lists, raising MalformedRecord on the first missing step."""
    node = payload
    for key in keys:
        try:
            node = node[key]
        except (KeyError, IndexError, TypeError):
            dotted = ".".join(str(k) for k in keys)
            raise MalformedRecord(f"Missing field '{dotted}'") from None
    return node


def parse_articles(payload: Any) -> list[Article]:
    """
    Map a NewsAPI response to articles.

    A response without an ``articles`` array yields an empty list. A single
    article missing one of the required keys aborts the whole batch, so
    callers never see a partial result.

    Raises:
        MalformedRecord: If an article lacks title/description/url/urlToImage.
    """
    if not isinstance(payload, dict):
        return []
    articles = payload.get("articles")
    if not isinstance(articles, list):
        return []

    result = []
    for index, raw in enumerate(articles):
        if not isinstance(raw, dict):
            raise MalformedRecord(f"Article #{index} is not an object")
        missing = [name for name in _ARTICLE_FIELDS if name not in raw]
        if missing:
            raise MalformedRecord(
                f"Article #{index} is missing field(s): {', '.join(missing)}"
            )
        result.append(Article(
            title=_text(raw["title"]),
            description=_text(raw["description"]),
            url=_text(raw["url"]),
            image_url=_text(raw["urlToImage"]),
        ))
    return result


def parse_weather(payload: Any, city: str) -> WeatherReport:
    """
    Map an OpenWeatherMap "current weather" response to a report.

    Raises:
        MalformedRecord: If any of the required paths is absent or not numeric.
    """
    description = _path(payload, "weather", 0, "description")
    main = _path(payload, "main")
    try:
        return WeatherReport(
            city=str(payload.get("name") or city),
            description=str(description),
            temp=float(_path(main, "temp")),
            temp_min=float(_path(main, "temp_min")),
            temp_max=float(_path(main, "temp_max")),
            humidity=int(_path(main, "humidity")),
            wind_speed=float(_path(payload, "wind", "speed")),
        )
    except (TypeError, ValueError) as e:
        raise MalformedRecord(f"Non-numeric weather value: {e}") from e


def parse_quote(payload: Any) -> Optional[Quote]:
    """
    Map a quotes API response (``[{"q": ..., "a": ...}, ...]``) to a quote.

    Returns:
        The first quote, or None if the array is empty.

    Raises:
        MalformedRecord: If the payload is not an array or element 0 lacks q/a.
    """
    if not isinstance(payload, list):
        raise MalformedRecord("Quote response is not an array")
    if not payload:
        return None
    return Quote(
        text=_text(_path(payload, 0, "q")),
        author=_text(_path(payload, 0, "a")),
    )
