"""HTML extraction: widget payloads from the landing page, articles from the fragment."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from sotay.config import settings
from sotay.scraper.models import ArticleRecord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------
_WIDGET_SELECTOR = ".view-data-widget .data-widget"
_ITEM_SELECTOR = ".items"
_LINK_SELECTOR = ".listitems_other_right .line-clamp-2 a"
_SUMMARY_SELECTOR = ".listitems_other_right .line-clamp-2 .desc"
_DATE_SELECTOR = ".card-text"
_IMAGE_SELECTOR = ".article-thumbnail img"

_WHITESPACE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def normalize_text(value: str) -> str:
    """Collapse every run of whitespace to a single space and strip the ends."""
    return _WHITESPACE.sub(" ", value).strip()


def absolute_url(ref: str, base_url: Optional[str] = None) -> str:
    """Resolve *ref* against the site origin."""
    base = (base_url or settings.hue_base_url).rstrip("/") + "/"
    return urljoin(base, ref)


def _joined_text(container, selector: str) -> str:  # type: ignore[no-untyped-def]
    return normalize_text("".join(el.get_text() for el in container.select(selector)))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_widget_payloads(html: str) -> List[dict[str, Any]]:
    """Return the decoded ``data-value`` JSON of every widget on the page.

    Widgets without a ``data-value`` are skipped silently.  A payload that
    fails to decode, or decodes to something other than an object, is
    logged and skipped without affecting the others.
    """
    soup = BeautifulSoup(html, "html.parser")
    payloads: List[dict[str, Any]] = []
    for element in soup.select(_WIDGET_SELECTOR):
        raw = element.get("data-value")
        if not raw:
            continue
        try:
            parsed = json.loads(str(raw).replace("&quot;", '"'))
        except json.JSONDecodeError as exc:
            logger.warning("Failed to parse widget payload %r: %s", raw, exc)
            continue
        if not isinstance(parsed, dict):
            logger.warning("Widget payload is not an object, skipping: %r", raw)
            continue
        payloads.append(parsed)
    return payloads


def parse_articles(fragment: str, base_url: Optional[str] = None) -> List[ArticleRecord]:
    """Parse every ``.items`` entry in *fragment* into an :class:`ArticleRecord`.

    Entries without a title link are dropped.  A link without ``href`` is kept
    and points at ``#`` on the site.  The result is not capped.
    """
    if not fragment:
        return []

    soup = BeautifulSoup(fragment, "html.parser")
    articles: List[ArticleRecord] = []
    for container in soup.select(_ITEM_SELECTOR):
        link = container.select_one(_LINK_SELECTOR)
        if link is None:
            continue

        image = container.select_one(_IMAGE_SELECTOR)
        image_src = image.get("src") if image is not None else None

        articles.append(
            ArticleRecord(
                title=normalize_text(link.get_text()),
                url=absolute_url(str(link.get("href") or "#"), base_url),
                summary=_joined_text(container, _SUMMARY_SELECTOR),
                published_at=_joined_text(container, _DATE_SELECTOR),
                image_url=absolute_url(str(image_src), base_url) if image_src else None,
            )
        )
    return articles
