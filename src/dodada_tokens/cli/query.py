"""
Inspection commands: resolve, list, check.

These load and merge the sources but write nothing.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from dodada_tokens.core.collector import collect_all, group_by_category
from dodada_tokens.core.errors import IdentifierCollisionError, TokenBuildError
from dodada_tokens.core.ir import Reference, TokenGroup, is_reference_string, parse_reference
from dodada_tokens.core.naming import check_unique
from dodada_tokens.core.resolver import find_reference_issues, resolve
from dodada_tokens.core.text_styles import collect_text_styles
from dodada_tokens.pipeline import load_tree

from .utils import load_project_manifest

ManifestOption = Annotated[
    Path | None,
    typer.Option("--manifest", "-m", help="Path to tokens.toml (default: ./tokens.toml or built-in defaults)"),
]


def _load(manifest: Path | None) -> TokenGroup:
    try:
        return load_tree(load_project_manifest(manifest))
    except TokenBuildError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _display(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _as_reference(text: str) -> Reference:
    reference = parse_reference(text.strip())
    if reference is None:
        reference = Reference(tuple(p for p in text.strip().split(".") if p))
    return reference


def resolve_command(
    reference: Annotated[str, typer.Argument(help="Token path, e.g. color.primary.500 or {color.primary.500}")],
    manifest: ManifestOption = None,
) -> None:
    """Print the resolved value of a token reference."""
    tree = _load(manifest)
    ref = _as_reference(reference)
    node = tree.find(ref.path)
    if isinstance(node, TokenGroup):
        typer.echo(f"Error: {ref.raw} is a group, not a token", err=True)
        raise typer.Exit(code=1)

    value = resolve(tree, ref)
    if is_reference_string(value):
        typer.echo(f"Error: cannot resolve {ref.raw}", err=True)
        raise typer.Exit(code=1)
    typer.echo(_display(value))


def list_command(
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only list this category"),
    ] = None,
    manifest: ManifestOption = None,
) -> None:
    """List tokens as ``category.identifier  type  value``."""
    tree = _load(manifest)
    categories = group_by_category(collect_all(tree))
    if category is not None:
        if category not in categories:
            typer.echo(f"Error: unknown category '{category}'", err=True)
            typer.echo(f"Known: {', '.join(categories)}", err=True)
            raise typer.Exit(code=1)
        categories = {category: categories[category]}

    for name, tokens in categories.items():
        for token in tokens:
            typer.echo(f"{name}.{token.identifier}\t{token.type}\t{_display(token.value)}")


def check_command(manifest: ManifestOption = None) -> None:
    """
    Check the sources for broken references and identifier collisions.

    Missing references are reported as warnings. Cycles and collisions are
    errors and make the command exit with code 1.
    """
    tree = _load(manifest)
    errors = 0

    for issue in find_reference_issues(tree):
        if issue.reason == "cyclic":
            errors += 1
            typer.echo(f"ERROR {issue.path}: cyclic reference {issue.reference} (at {issue.at})")
        else:
            typer.echo(f"WARN  {issue.path}: {issue.reference} does not resolve ({issue.reason} at {issue.at})")

    for name, tokens in group_by_category(collect_all(tree)).items():
        try:
            check_unique(name, ((t.identifier, t.path) for t in tokens))
        except IdentifierCollisionError as e:
            errors += 1
            typer.echo(f"ERROR {e.message}")

    try:
        collect_text_styles(tree, strict=False)
    except IdentifierCollisionError as e:
        errors += 1
        typer.echo(f"ERROR {e.message}")

    if errors:
        typer.echo(f"{errors} error(s)", err=True)
        raise typer.Exit(code=1)
    typer.echo("OK")
