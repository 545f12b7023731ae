"""FastAPI application factory.

Routers
-------
    /hueGuideFeed  — latest tour-guide articles scraped from sdl.hue.gov.vn

The scraper keeps no process-wide state: each request opens its own HTTP
client and cookie jar, so the app needs no lifespan resources.
"""

from __future__ import annotations

from fastapi import FastAPI

from sotay.config import settings
from sotay.api.routers import feed as feed_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    settings.configure_logging()

    app = FastAPI(
        title="Sổ Tay HDV API",
        description=(
            "Serverless-style HTTP surface for the Sổ Tay HDV directory. "
            "Exposes the Huế Department of Tourism tour-guide news feed."
        ),
        version="0.1.0",
    )

    # CORS headers are set per route; the feed must answer bare OPTIONS with 204.
    app.include_router(feed_router.router, tags=["feed"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn sotay.api.app:app --reload
app = create_app()
