"""Data models for the sdl.hue.gov.vn scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class CookieJar:
    """Holds the ``D1N`` session token scraped from an inline script.

    One jar per pipeline invocation; the fetcher mutates it in place.
    """

    session_token: Optional[str] = None

    def cookie_header(self) -> Optional[str]:
        if not self.session_token:
            return None
        return f"D1N={self.session_token}"


@dataclass(frozen=True)
class ArticleRecord:
    """A single article summary parsed from the content fragment."""

    title: str
    url: str
    summary: str
    published_at: str
    image_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "summary": self.summary,
            "publishedAt": self.published_at,
            "imageUrl": self.image_url,
        }


@dataclass
class HueFeed:
    """The bounded article list returned to callers, tagged with its origin."""

    source: str
    articles: List[ArticleRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "articles": [a.to_dict() for a in self.articles],
        }
