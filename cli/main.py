"""Sổ Tay HDV CLI: entry-point for backend operations.

Usage:
    python cli/main.py --help

Sub-command groups:
    feed      → sdl.hue.gov.vn tour-guide news feed
    province  → province-name resolution
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from sotay.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from sotay.config import settings
from cli.commands.feed import feed_app
from cli.commands.province import province_app

app = typer.Typer(
    name="sotay",
    help="Sổ Tay HDV backend CLI.",
    no_args_is_help=True,
)
app.add_typer(feed_app, name="feed")
app.add_typer(province_app, name="province")


@app.callback()
def main() -> None:
    """Configure logging before any sub-command runs."""
    settings.configure_logging()


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
