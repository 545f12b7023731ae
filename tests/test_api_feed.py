"""Tests for the /hueGuideFeed route.

The pipeline is either patched out (envelope/CORS behaviour) or driven through
``respx`` (end-to-end), so no external services are required.
"""

from __future__ import annotations

from typing import Generator
from unittest.mock import patch

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from sotay.api.app import create_app
from sotay.config import settings
from sotay.scraper.errors import SessionNegotiationError
from sotay.scraper.models import ArticleRecord, HueFeed


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app()) as c:
        yield c


def _feed(count: int) -> HueFeed:
    return HueFeed(
        source=settings.hue_base_url,
        articles=[
            ArticleRecord(
                title=f"Bài {i}",
                url=f"{settings.hue_base_url}/bai-{i}.html",
                summary="",
                published_at="17/03/2025",
                image_url=None,
            )
            for i in range(count)
        ],
    )


def _assert_cors(resp) -> None:  # type: ignore[no-untyped-def]
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-methods"] == "GET, OPTIONS"
    assert resp.headers["access-control-allow-headers"] == "Content-Type"


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestHueGuideFeedRoute:
    def test_success_envelope(self, client: TestClient) -> None:
        with patch("sotay.api.routers.feed.fetch_hue_guide_feed", return_value=_feed(2)):
            resp = client.get("/hueGuideFeed")

        assert resp.status_code == 200
        _assert_cors(resp)
        body = resp.json()
        assert body["source"] == settings.hue_base_url
        assert body["articles"][0] == {
            "title": "Bài 0",
            "url": f"{settings.hue_base_url}/bai-0.html",
            "summary": "",
            "publishedAt": "17/03/2025",
            "imageUrl": None,
        }
        assert len(body["articles"]) == 2

    def test_options_preflight_is_204_empty(self, client: TestClient) -> None:
        resp = client.options("/hueGuideFeed")

        assert resp.status_code == 204
        assert resp.content == b""
        _assert_cors(resp)

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("unreachable"),
            SessionNegotiationError("/huong-dan-vien.html", 5),
            ValueError("unexpected"),
        ],
    )
    def test_any_failure_maps_to_fixed_error(self, client: TestClient, error: Exception) -> None:
        with patch("sotay.api.routers.feed.fetch_hue_guide_feed", side_effect=error):
            resp = client.get("/hueGuideFeed")

        assert resp.status_code == 500
        _assert_cors(resp)
        assert resp.json() == {
            "error": "failed-to-fetch-hue-feed",
            "message": "Không thể lấy dữ liệu từ sdl.hue.gov.vn",
        }

    def test_failure_is_logged(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with patch(
            "sotay.api.routers.feed.fetch_hue_guide_feed",
            side_effect=httpx.ConnectError("unreachable"),
        ):
            with caplog.at_level("ERROR", logger="sotay.api.routers.feed"):
                client.get("/hueGuideFeed")

        assert "Failed to fetch hue guide feed" in caplog.text

    def test_no_fragment_returns_200_with_empty_articles(self, client: TestClient) -> None:
        landing_url = f"{settings.hue_base_url}{settings.hue_landing_path}"
        widget_url = f"{settings.hue_base_url}{settings.hue_widget_path}"
        landing = (
            '<div class="view-data-widget">'
            '<div class="data-widget" data-value="{&quot;id&quot;:&quot;1&quot;}"></div></div>'
        )
        with respx.mock(assert_all_called=False) as router:
            router.get(landing_url).mock(return_value=httpx.Response(200, text=landing))
            router.post(widget_url).mock(return_value=httpx.Response(200, text="no content here"))
            resp = client.get("/hueGuideFeed")

        assert resp.status_code == 200
        assert resp.json() == {"source": settings.hue_base_url, "articles": []}
