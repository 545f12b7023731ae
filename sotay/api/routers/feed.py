"""Huế tour-guide feed endpoint.

Routes
------
GET     /hueGuideFeed    → {"source": ..., "articles": [...]}  (≤ 6)
OPTIONS /hueGuideFeed    → 204 (CORS preflight)

The feed is consumed directly from the browser, so every response carries
permissive CORS headers, errors included.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from sotay.scraper.feed import fetch_hue_guide_feed

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ERROR_CODE = "failed-to-fetch-hue-feed"
ERROR_MESSAGE = "Không thể lấy dữ liệu từ sdl.hue.gov.vn"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ArticleOut(BaseModel):
    title: str
    url: str
    summary: str
    published_at: str = Field(alias="publishedAt")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class FeedResponse(BaseModel):
    source: str
    articles: List[ArticleOut]


class FeedError(BaseModel):
    error: str
    message: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.options("/hueGuideFeed", status_code=204)
def hue_guide_feed_preflight() -> Response:
    return Response(status_code=204, headers=CORS_HEADERS)


@router.get(
    "/hueGuideFeed",
    response_model=FeedResponse,
    responses={500: {"model": FeedError}},
)
def hue_guide_feed(response: Response) -> Any:
    """Scrape sdl.hue.gov.vn and return its latest tour-guide articles.

    Either the full bounded list or the fixed error envelope; never a
    partial result.
    """
    try:
        feed = fetch_hue_guide_feed()
    except Exception:
        logger.exception("Failed to fetch hue guide feed")
        return JSONResponse(
            status_code=500,
            content={"error": ERROR_CODE, "message": ERROR_MESSAGE},
            headers=CORS_HEADERS,
        )
    response.headers.update(CORS_HEADERS)
    return feed.to_dict()
