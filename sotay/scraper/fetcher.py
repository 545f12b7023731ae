"""HTTP fetcher for sdl.hue.gov.vn with script-cookie session bootstrap.

The site does not use ``Set-Cookie``.  Instead the first response embeds::

    <script>document.cookie="D1N=abc123"; window.location.reload();</script>

and expects the browser to retry with that cookie.  :func:`fetch_with_cookies`
scrapes the token into a :class:`CookieJar` and reissues the request until a
response arrives without the reload marker.
"""

from __future__ import annotations

import logging
import re
import time
from typing import Mapping, Optional

import httpx

from sotay.config import settings
from sotay.scraper.errors import FeedTimeoutError, SessionNegotiationError
from sotay.scraper.models import CookieJar

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Session-cookie detection
# ---------------------------------------------------------------------------
_COOKIE_PATTERN = re.compile(r'document\.cookie="D1N=([A-Za-z0-9]+)"')
_RELOAD_MARKER = "window.location.reload"

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; SoTayHDV-Bot/1.0; +https://so-tay-cho-hdv.web.app)"
    )
}


def new_client() -> httpx.Client:
    """Return a fresh client for one pipeline invocation.

    Callers own the client and must close it; nothing here is shared
    between invocations.
    """
    return httpx.Client(
        headers=DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def _request_timeout(deadline: Optional[float]) -> float:
    """Per-request timeout, clipped to whatever is left of *deadline*."""
    if deadline is None:
        return settings.request_timeout
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise FeedTimeoutError("feed-timeout: pipeline budget exhausted")
    return min(settings.request_timeout, remaining)


def fetch_with_cookies(
    client: httpx.Client,
    path: str,
    jar: CookieJar,
    *,
    body: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    deadline: Optional[float] = None,
    base_url: Optional[str] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """Fetch *path* on the upstream site and return the response body.

    The request is a ``POST`` when *body* is given, otherwise a ``GET``.  A
    ``Cookie`` header is added from *jar* on every attempt.  When the body
    carries a ``D1N`` cookie script the token is stored in *jar*; if it also
    asks for a reload, the same request is repeated with the new cookie.

    Args:
        client: Open HTTP client owned by the caller.
        path: Path relative to :attr:`Settings.hue_base_url`.
        jar: Session jar, updated in place.
        body: Pre-encoded request body.
        headers: Extra request headers.
        deadline: ``time.monotonic()`` value after which no new request is
            issued.
        base_url: Overrides the configured base origin.
        max_attempts: Overrides :attr:`Settings.session_max_attempts`.

    Raises:
        SessionNegotiationError: If every attempt asked for another reload.
        FeedTimeoutError: If *deadline* passes before a request is issued or
            while its body is being read.
        httpx.HTTPError: On transport failures (not retried).
    """
    url = f"{base_url or settings.hue_base_url}{path}"
    method = "POST" if body is not None else "GET"
    attempts = max_attempts or settings.session_max_attempts

    for attempt in range(1, attempts + 1):
        request_headers = dict(headers or {})
        cookie = jar.cookie_header()
        if cookie:
            request_headers["Cookie"] = cookie

        logger.debug("%s %s (attempt %d/%d)", method, url, attempt, attempts)
        response = client.request(
            method,
            url,
            content=body,
            headers=request_headers,
            timeout=_request_timeout(deadline),
        )
        text = response.text
        if deadline is not None and time.monotonic() > deadline:
            raise FeedTimeoutError(
                "feed-timeout: pipeline budget exhausted while reading %s" % path
            )

        match = _COOKIE_PATTERN.search(text)
        if not match:
            return text

        jar.session_token = match.group(1)
        logger.debug("Session cookie refreshed from %s", path)
        if _RELOAD_MARKER not in text:
            return text

    raise SessionNegotiationError(path, attempts)
