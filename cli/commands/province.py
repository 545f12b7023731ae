"""Province commands for normalising free-form issuing places."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from sotay.provinces import resolve_province_name

province_app = typer.Typer(help="Province-name utilities.", no_args_is_help=True)


@province_app.callback()
def province_group() -> None:
    """Province-name utilities."""


def _read_choices(path: Path) -> List[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


@province_app.command("resolve")
def province_resolve(
    raw: str = typer.Argument(..., help="Free-form province text, e.g. 'Tỉnh Thừa Thiên Huế'."),
    choice: Optional[List[str]] = typer.Option(None, "--choice", "-c", help="Canonical province name (repeatable)."),
    choices_file: Optional[Path] = typer.Option(
        None,
        "--choices-file",
        exists=True,
        dir_okay=False,
        help="File with one canonical province name per line.",
    ),
) -> None:
    """Print the canonical province that RAW refers to."""
    provinces = list(choice or [])
    if choices_file is not None:
        provinces.extend(_read_choices(choices_file))

    typer.echo(resolve_province_name(raw, provinces))
