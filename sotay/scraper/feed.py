"""Huế tour-guide news feed.

``fetch_hue_guide_feed`` chains the scraper stages for one request:

    landing page → widget payloads → content fragment → articles (≤ 6)

Every stage shares one :class:`CookieJar` and one HTTP client, both created
for the call and never reused by another invocation.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from sotay.config import settings
from sotay.scraper.extractor import extract_widget_payloads, parse_articles
from sotay.scraper.fetcher import fetch_with_cookies, new_client
from sotay.scraper.models import CookieJar, HueFeed
from sotay.scraper.resolver import resolve_widget_fragment

logger = logging.getLogger(__name__)

MAX_ARTICLES = 6


def fetch_hue_guide_feed(
    client: Optional[httpx.Client] = None,
    *,
    limit: Optional[int] = None,
) -> HueFeed:
    """Scrape the latest tour-guide articles from sdl.hue.gov.vn.

    Args:
        client: HTTP client to use.  When omitted a fresh one is opened and
            closed around the call.
        limit: Maximum number of articles; never more than
            :data:`MAX_ARTICLES`.

    Raises:
        httpx.HTTPError: On transport failures.
        ScrapeError: If session negotiation or the time budget fails.
    """
    if client is None:
        with new_client() as own_client:
            return fetch_hue_guide_feed(own_client, limit=limit)

    requested = limit if limit is not None else settings.feed_article_limit
    cap = max(0, min(requested, MAX_ARTICLES))
    deadline = time.monotonic() + settings.feed_budget
    jar = CookieJar()

    page_html = fetch_with_cookies(client, settings.hue_landing_path, jar, deadline=deadline)
    payloads = extract_widget_payloads(page_html)
    fragment = resolve_widget_fragment(client, payloads, jar, deadline=deadline)
    articles = parse_articles(fragment)

    logger.info(
        "Hue feed: payloads=%d fragment=%s articles=%d returned=%d",
        len(payloads),
        "hit" if fragment else "miss",
        len(articles),
        min(len(articles), cap),
    )
    return HueFeed(source=settings.hue_base_url, articles=articles[:cap])
