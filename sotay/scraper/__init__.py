"""Scraper package — sdl.hue.gov.vn fetch, widget replay & article extraction."""

from sotay.scraper.errors import FeedTimeoutError, ScrapeError, SessionNegotiationError
from sotay.scraper.extractor import extract_widget_payloads, parse_articles
from sotay.scraper.feed import fetch_hue_guide_feed
from sotay.scraper.fetcher import fetch_with_cookies
from sotay.scraper.models import ArticleRecord, CookieJar, HueFeed
from sotay.scraper.resolver import resolve_widget_fragment

__all__ = [
    "fetch_hue_guide_feed",
    "fetch_with_cookies",
    "extract_widget_payloads",
    "resolve_widget_fragment",
    "parse_articles",
    "ArticleRecord",
    "CookieJar",
    "HueFeed",
    "ScrapeError",
    "SessionNegotiationError",
    "FeedTimeoutError",
]
