"""Exceptions raised by the scraper pipeline.

Transport failures are left as :class:`httpx.HTTPError`; these cover the
application-level ways a fetch chain can fail to terminate.
"""

from __future__ import annotations


class ScrapeError(RuntimeError):
    """Base class for pipeline failures that are not transport errors."""

    code = "scrape-failed"


class SessionNegotiationError(ScrapeError):
    """The upstream kept asking for a reload after ``max_attempts`` requests."""

    code = "session-negotiation-failed"

    def __init__(self, path: str, attempts: int) -> None:
        super().__init__(
            f"{self.code}: {path!r} still requested a reload after {attempts} attempts"
        )
        self.path = path
        self.attempts = attempts


class FeedTimeoutError(ScrapeError):
    """The overall wall-clock budget ran out before the next request."""

    code = "feed-timeout"
