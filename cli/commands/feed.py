"""Feed commands: run the sdl.hue.gov.vn scraper from the terminal."""

from __future__ import annotations

import json
from typing import Optional

import httpx
import typer

from sotay.scraper import ScrapeError, fetch_hue_guide_feed

feed_app = typer.Typer(help="Huế tour-guide news feed.", no_args_is_help=True)


@feed_app.callback()
def feed_group() -> None:
    """Huế tour-guide news feed scraped from sdl.hue.gov.vn."""


@feed_app.command("fetch")
def feed_fetch(
    limit: Optional[int] = typer.Option(None, "--limit", min=1, max=6, help="Maximum articles (1-6)."),
) -> None:
    """Scrape the feed and print the same JSON envelope the API returns."""
    try:
        feed = fetch_hue_guide_feed(limit=limit)
    except (httpx.HTTPError, ScrapeError) as exc:
        typer.echo(f"❌ Failed to fetch feed: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(feed.to_dict(), ensure_ascii=False, indent=2))
