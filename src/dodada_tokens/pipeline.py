"""
Build orchestration.

Runs the whole token build for a manifest: load and merge the sources,
write the resolved tree, collect tokens and text styles, render every
enabled platform and theme in memory, then write the results under the
dist directory. Nothing under dist is touched unless every render succeeds.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .core.collector import collect_categories
from .core.errors import IdentifierCollisionError, ManifestError, ThemeNotFoundError
from .core.ir import CategoryMap, TextStyle, TokenGroup
from .core.loader import load_sources
from .core.manifest import PLATFORMS, BuildManifest
from .core.merger import merge, tree_to_json
from .core.resolver import ReferenceIssue, find_reference_issues
from .core.text_styles import collect_text_styles
from .core.themes import materialize
from .emitters import (
    EmitOptions,
    emit_asset_catalogs,
    emit_css,
    emit_kotlin,
    emit_scss,
    emit_swift,
    emit_theme,
    emit_typescript,
)

logger = logging.getLogger(__name__)

RESOLVED_TREE_FILE = "tokens.resolved.json"

# Output folder (under dist) per platform.
PLATFORM_DIRS: dict[str, str] = {
    "ios": "ios",
    "android": "android",
    "web": "web",
    "css": "css",
    "scss": "scss",
    "assets": "ios",
}

THEME_DIR = "theme"


@dataclass
class BuildResult:
    """Summary of one build."""

    written: list[Path] = field(default_factory=list)
    token_counts: dict[str, int] = field(default_factory=dict)
    text_style_count: int = 0
    themes: list[str] = field(default_factory=list)
    issues: list[ReferenceIssue] = field(default_factory=list)

    @property
    def token_count(self) -> int:
        return sum(self.token_counts.values())

    @property
    def warning_count(self) -> int:
        return len(self.issues)


def load_tree(manifest: BuildManifest) -> TokenGroup:
    """Load and merge the manifest's sources into a normalized tree."""
    documents = load_sources(manifest.source_root, manifest.sources.files)
    return merge(documents)


def emit_options(manifest: BuildManifest, strict: bool | None = None) -> EmitOptions:
    return EmitOptions(
        prefix=manifest.project.prefix,
        kotlin_package=manifest.output.kotlin_package,
        strict=manifest.build.strict if strict is None else strict,
    )


def select_platforms(manifest: BuildManifest, platforms: list[str] | None = None) -> list[str]:
    """Platforms to build: an explicit selection, else the manifest's.

    Raises:
        ManifestError: If the selection names an unknown platform.
    """
    if not platforms:
        return list(manifest.output.platforms)
    unknown = [p for p in platforms if p not in PLATFORMS]
    if unknown:
        raise ManifestError(f"Unknown platform(s): {', '.join(unknown)}. Known: {', '.join(PLATFORMS)}")
    return list(dict.fromkeys(platforms))


def render_platforms(
    categories: CategoryMap,
    text_styles: list[TextStyle],
    platforms: list[str],
    options: EmitOptions,
) -> dict[str, str]:
    """Render every selected platform, keyed by path relative to dist."""
    files: dict[str, str] = {}

    def add(platform: str, rendered: dict[str, str]) -> None:
        base = PLATFORM_DIRS[platform]
        for rel, content in rendered.items():
            files[f"{base}/{rel}"] = content

    for platform in platforms:
        if platform == "ios":
            add(platform, emit_swift(categories, text_styles, options))
        elif platform == "android":
            add(platform, emit_kotlin(categories, text_styles, options))
        elif platform == "web":
            add(platform, {"tokens.ts": emit_typescript(categories, text_styles, options)})
        elif platform == "css":
            add(platform, {"variables.css": emit_css(categories)})
        elif platform == "scss":
            add(platform, {"_variables.scss": emit_scss(categories)})
        elif platform == "assets":
            add(platform, emit_asset_catalogs(categories))
    return files


def render_themes(
    tree: TokenGroup,
    manifest: BuildManifest,
    platforms: list[str],
    options: EmitOptions,
) -> tuple[dict[str, str], list[str]]:
    """Materialize and render each configured theme.

    A configured theme that is not in the tree is skipped with a warning.
    The first configured theme is the default one; Swift types of the others
    carry the theme name.

    Returns:
        Files keyed by path relative to dist, and the names of the themes
        that were rendered.
    """
    files: dict[str, str] = {}
    owners: dict[str, str] = {}
    rendered: list[str] = []
    for index, name in enumerate(manifest.themes.names):
        theme_path = manifest.themes.path_for(name)
        try:
            data = materialize(tree, theme_path)
        except ThemeNotFoundError as e:
            logger.warning("Skipping theme '%s': %s", name, e.message)
            continue
        output = emit_theme(name, data, options, default=index == 0)
        theme_files = {f"{THEME_DIR}/{rel}": content for rel, content in output["theme"].items()}
        if "ios" in platforms:
            for rel, content in output["ios"].items():
                theme_files[f"{PLATFORM_DIRS['ios']}/{rel}"] = content
        for path, content in theme_files.items():
            if path in files and files[path] != content:
                raise IdentifierCollisionError("theme", path, owners[path], name)
            files[path] = content
            owners.setdefault(path, name)
        rendered.append(name)
    return files, rendered


def write_files(root: Path, files: dict[str, str]) -> list[Path]:
    """Write ``files`` (relative path → content) under ``root``."""
    written = []
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written


def write_resolved_tree(manifest: BuildManifest, tree: TokenGroup) -> Path:
    """Write the merged tree to ``<build_dir>/tokens.resolved.json``."""
    path = manifest.build_dir / RESOLVED_TREE_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(tree_to_json(tree), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info("Wrote %s", path)
    return path


def build(
    manifest: BuildManifest,
    platforms: list[str] | None = None,
    strict: bool | None = None,
) -> BuildResult:
    """Run the full build.

    Args:
        manifest: Build configuration.
        platforms: Restrict output to these platforms (default: the manifest's).
        strict: Override the manifest's value-parsing policy.

    Returns:
        BuildResult describing what was written.

    Raises:
        TokenBuildError: On a fatal source, naming, or value error. No dist
            file is written in that case.
    """
    selected = select_platforms(manifest, platforms)
    options = emit_options(manifest, strict)

    tree = load_tree(manifest)
    result = BuildResult()
    result.written.append(write_resolved_tree(manifest, tree))

    result.issues = find_reference_issues(tree)
    for issue in result.issues:
        logger.warning(
            "Unresolved reference at %s: %s (%s at %s)",
            issue.path,
            issue.reference,
            issue.reason,
            issue.at,
        )

    categories = collect_categories(tree)
    text_styles = collect_text_styles(tree, strict=options.strict)
    result.token_counts = {category: len(tokens) for category, tokens in categories.items()}
    result.text_style_count = len(text_styles)

    files = render_platforms(categories, text_styles, selected, options)
    theme_files, result.themes = render_themes(tree, manifest, selected, options)
    files.update(theme_files)

    result.written.extend(write_files(manifest.dist_dir, files))
    logger.info(
        "Built %d tokens in %d categories, %d files",
        result.token_count,
        len(result.token_counts),
        len(files),
    )
    return result
