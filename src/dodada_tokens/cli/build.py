"""
Build command.

Runs the token pipeline and prints a summary table.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from dodada_tokens.core.errors import TokenBuildError
from dodada_tokens.pipeline import build

from .utils import load_project_manifest

console = Console()


def build_command(
    manifest: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Path to tokens.toml (default: ./tokens.toml or built-in defaults)"),
    ] = None,
    platform: Annotated[
        list[str] | None,
        typer.Option("--platform", "-p", help="Only build this platform (repeatable)"),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option("--lenient", help="Use 0 for unparseable dimensions instead of failing"),
    ] = False,
) -> None:
    """
    Build platform sources from the token files.

    Examples:
        dodada-tokens build
        dodada-tokens build -p ios -p web
        dodada-tokens build --manifest config/tokens.toml --lenient
    """
    try:
        mf = load_project_manifest(manifest)
        result = build(mf, platforms=platform or None, strict=False if lenient else None)
    except TokenBuildError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    table = Table(title="Design tokens")
    table.add_column("Category", style="cyan")
    table.add_column("Tokens", justify="right")
    for category, count in result.token_counts.items():
        table.add_row(category, str(count))
    if result.text_style_count:
        table.add_row("text styles", str(result.text_style_count))
    console.print(table)

    if result.themes:
        console.print(f"Themes: {', '.join(result.themes)}")
    if result.warning_count:
        console.print(f"[yellow]{result.warning_count} unresolved reference(s)[/yellow]")
    console.print(f"[green]Wrote {len(result.written)} files[/green] to {mf.dist_dir}")
