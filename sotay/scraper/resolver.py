"""Fragment resolver: replay widget payloads until the content region comes back."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

import httpx

from sotay.config import settings
from sotay.scraper.fetcher import fetch_with_cookies
from sotay.scraper.models import CookieJar

logger = logging.getLogger(__name__)

FRAGMENT_MARKER = "page-content"

_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded; charset=UTF-8"}


def _form_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def encode_payload(payload: Mapping[str, Any]) -> str:
    """Form-encode *payload*; ``None`` values become empty fields."""
    pairs: List[Tuple[str, str]] = [(str(k), _form_value(v)) for k, v in payload.items()]
    return urlencode(pairs)


def resolve_widget_fragment(
    client: httpx.Client,
    payloads: Iterable[Mapping[str, Any]],
    jar: CookieJar,
    *,
    deadline: Optional[float] = None,
) -> str:
    """POST each payload in order and return the first real content fragment.

    Returns an empty string when no payload produces a response containing
    :data:`FRAGMENT_MARKER`.
    """
    for index, payload in enumerate(payloads):
        fragment = fetch_with_cookies(
            client,
            settings.hue_widget_path,
            jar,
            body=encode_payload(payload),
            headers=_FORM_HEADERS,
            deadline=deadline,
        )
        if FRAGMENT_MARKER in fragment:
            logger.debug("Widget payload #%d yielded the content fragment", index)
            return fragment
        logger.debug("Widget payload #%d returned no content fragment", index)
    return ""
