"""
repositories/news_catalog.py
----------------------------
In-memory store for the most recently fetched news.

There is exactly one catalog per running bot. It is created in main.py
and handed to everything that needs it; nothing reaches it through a
module-level global.

Concurrency:
    Handlers and the daily job run as concurrent tasks on one event loop.
    The catalog state is one immutable snapshot object and ``replace``
    swaps the reference in a single assignment, so a reader always works
    on either the complete old snapshot or the complete new one. Readers
    grab the reference once per call.
"""

from datetime import datetime, timezone
from typing import Iterable, NamedTuple, Optional

from config import NEWS_PAGE_SIZE
from models.news import Article, NewsItem, NewsPage
from utils.logger import get_logger

logger = get_logger(__name__)


class _Snapshot(NamedTuple):
    items: tuple[NewsItem, ...]
    label: Optional[str]
    updated_at: Optional[datetime]


_EMPTY = _Snapshot((), None, None)


class NewsCatalog:
    """
    Ordered, replace-only collection of news items.

    Invariant: the catalog is either empty or holds items with ids
    ``1..N`` in insertion order.
    """

    def __init__(self):
        self._snapshot = _EMPTY

    # ── Writes ─────────────────────────────────────────────

    def replace(self, articles: Iterable[Article], label: Optional[str] = None) -> tuple[NewsItem, ...]:
        """
        Replace the whole catalog with freshly fetched articles.

        Args:
            articles: Articles in provider order.
            label: What the articles were fetched for, shown in page headers.

        Returns:
            The new items, with ids assigned 1..N in input order.
        """
        items = tuple(
            NewsItem.from_article(position, article)
            for position, article in enumerate(articles, start=1)
        )
        self._snapshot = _Snapshot(items, label, datetime.now(timezone.utc))
        logger.info(f"Catalog replaced: {len(items)} item(s) for {label or 'unlabelled query'}")
        return items

    def clear(self) -> None:
        self._snapshot = _EMPTY

    # ── Reads ──────────────────────────────────────────────

    @property
    def items(self) -> tuple[NewsItem, ...]:
        """Current items."""
        return self._snapshot.items

    @property
    def label(self) -> Optional[str]:
        return self._snapshot.label

    @property
    def updated_at(self) -> Optional[datetime]:
        """When the catalog was last replaced (UTC), None if never."""
        return self._snapshot.updated_at

    def __len__(self) -> int:
        return len(self._snapshot.items)

    def is_empty(self) -> bool:
        return not self._snapshot.items

    def page(self, offset: int = 0, page_size: int = NEWS_PAGE_SIZE) -> Optional[NewsPage]:
        """
        Get the slice ``[offset, offset + page_size)`` of the catalog.

        Returns:
            None if the catalog is empty ("no news available").
            Otherwise a NewsPage; an offset past the end gives a page with
            no items and ``has_more`` False.

        Raises:
            ValueError: If offset is negative or page_size is not positive.
        """
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        snapshot = self._snapshot
        if not snapshot.items:
            return None
        return NewsPage(
            items=snapshot.items[offset:offset + page_size],
            offset=offset,
            page_size=page_size,
            total=len(snapshot.items),
            label=snapshot.label,
        )

    def lookup(self, news_id: int) -> Optional[NewsItem]:
        """Return the item with this id, or None if it is not in the current snapshot."""
        items = self._snapshot.items
        if 1 <= news_id <= len(items):
            return items[news_id - 1]
        return None
