"""
models/news.py
--------------
Domain models for news articles and paginated catalog views.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """
    A normalized article as returned by the news provider, before it
    has been placed in the catalog.

    Attributes:
        title: Headline.
        description: Short summary (may be empty).
        url: Link to the full story.
        image_url: Link to the lead image (may be empty).
    """
    title: str
    description: str
    url: str
    image_url: str


@dataclass(frozen=True)
class NewsItem:
    """
    An article placed in the catalog.

    Attributes:
        id: 1-based position assigned when the catalog was replaced.
            Only meaningful for the current catalog snapshot.
        title: Headline.
        description: Short summary (may be empty).
        url: Link to the full story.
        image_url: Link to the lead image (may be empty).
    """
    id: int
    title: str
    description: str
    url: str
    image_url: str

    @classmethod
    def from_article(cls, news_id: int, article: Article) -> "NewsItem":
        return cls(
            id=news_id,
            title=article.title,
            description=article.description,
            url=article.url,
            image_url=article.image_url,
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.title}"


@dataclass(frozen=True)
class NewsPage:
    """
    A bounded, offset-based slice of the catalog.

    Attributes:
        items: News items in ``[offset, offset + page_size)``.
        offset: Index of the first item on this page.
        page_size: Maximum number of items per page.
        total: Catalog length at the time the page was taken.
        label: What the catalog was fetched for (country name, "Top headlines").
    """
    items: tuple[NewsItem, ...]
    offset: int
    page_size: int
    total: int
    label: str | None = None

    @property
    def has_more(self) -> bool:
        """True if another page follows this one."""
        return self.offset + self.page_size < self.total

    @property
    def next_offset(self) -> int:
        return self.offset + self.page_size
