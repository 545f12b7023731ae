"""Centralised settings for the Sổ Tay HDV backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Upstream site (sdl.hue.gov.vn)
    # ------------------------------------------------------------------
    hue_base_url: str = field(
        default_factory=lambda: os.environ.get("HUE_BASE_URL", "https://sdl.hue.gov.vn")
    )
    hue_landing_path: str = field(
        default_factory=lambda: os.environ.get("HUE_LANDING_PATH", "/huong-dan-vien.html")
    )
    hue_widget_path: str = field(
        default_factory=lambda: os.environ.get("HUE_WIDGET_PATH", "/trang-chu")
    )

    # ------------------------------------------------------------------
    # Scraper limits
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "15.0"))
    )
    session_max_attempts: int = field(
        default_factory=lambda: int(os.environ.get("SESSION_MAX_ATTEMPTS", "5"))
    )
    feed_budget: float = field(
        default_factory=lambda: float(os.environ.get("FEED_BUDGET", "30.0"))
    )
    feed_article_limit: int = field(
        default_factory=lambda: int(os.environ.get("FEED_ARTICLE_LIMIT", "6"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    def configure_logging(self) -> None:
        """Apply :attr:`log_level` to the root logger (no-op if already configured)."""
        logging.basicConfig(
            level=self.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Module-level singleton, import this everywhere:
#   from sotay.config import settings
settings = Settings()
