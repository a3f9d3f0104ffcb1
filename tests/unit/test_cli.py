"""Tests for CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dodada_tokens.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


def _manifest(project: Path) -> list[str]:
    return ["--manifest", str(project / "tokens.toml")]


class TestBuildCommand:
    def test_success(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["build", *_manifest(token_project)])
        assert result.exit_code == 0, result.output
        assert "spacing" in result.output
        assert (token_project / "dist/css/variables.css").exists()

    def test_platform_option(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["build", *_manifest(token_project), "-p", "web"])
        assert result.exit_code == 0, result.output
        assert (token_project / "dist/web/tokens.ts").exists()
        assert not (token_project / "dist/css").exists()

    def test_error_exit_code(self, cli_runner: CliRunner, project_factory: Callable[..., Path]) -> None:
        root = project_factory({"tokens/spacing.json": {"spacing": {"x": {"$value": "12rem", "$type": "dimension"}}}})
        result = cli_runner.invoke(app, ["build", *_manifest(root)])
        assert result.exit_code == 1
        assert "12rem" in result.output

    def test_lenient_flag(self, cli_runner: CliRunner, project_factory: Callable[..., Path]) -> None:
        root = project_factory({"tokens/spacing.json": {"spacing": {"x": {"$value": "12rem", "$type": "dimension"}}}})
        result = cli_runner.invoke(app, ["build", *_manifest(root), "--lenient"])
        assert result.exit_code == 0, result.output

    def test_missing_manifest(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["build", "--manifest", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestResolveCommand:
    def test_resolves_chain(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["resolve", "color.primary.light", *_manifest(token_project)])
        assert result.exit_code == 0, result.output
        assert "#ED2124" in result.output

    def test_brace_syntax(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["resolve", "{spacing.sm}", *_manifest(token_project)])
        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("8")

    def test_missing(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["resolve", "does.not.exist", *_manifest(token_project)])
        assert result.exit_code == 1
        assert "cannot resolve" in result.output

    def test_group(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["resolve", "color.primary", *_manifest(token_project)])
        assert result.exit_code == 1
        assert "group" in result.output


class TestListCommand:
    def test_category(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["list", "--category", "spacing", *_manifest(token_project)])
        assert result.exit_code == 0, result.output
        assert "spacing.sm\tdimension\t8" in result.output
        assert "color." not in result.output

    def test_all(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["list", *_manifest(token_project)])
        assert result.exit_code == 0, result.output
        assert "color.primaryLight\tcolor\t#ED2124" in result.output
        assert "fontFamily.familyBase\tfontFamily\tInter" in result.output

    def test_unknown_category(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["list", "-c", "nope", *_manifest(token_project)])
        assert result.exit_code == 1


class TestCheckCommand:
    def test_clean(self, cli_runner: CliRunner, token_project: Path) -> None:
        result = cli_runner.invoke(app, ["check", *_manifest(token_project)])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output

    def test_missing_reference_is_warning(self, cli_runner: CliRunner, project_factory: Callable[..., Path]) -> None:
        root = project_factory({"tokens/a.json": {"spacing": {"x": {"$value": "{does.not.exist}"}}}})
        result = cli_runner.invoke(app, ["check", *_manifest(root)])
        assert result.exit_code == 0, result.output
        assert "WARN" in result.output

    def test_cycle_fails(self, cli_runner: CliRunner, project_factory: Callable[..., Path]) -> None:
        root = project_factory({"tokens/a.json": {"spacing": {"a": {"$value": "{spacing.b}"}, "b": {"$value": "{spacing.a}"}}}})
        result = cli_runner.invoke(app, ["check", *_manifest(root)])
        assert result.exit_code == 1
        assert "cyclic" in result.output

    def test_collision_fails(self, cli_runner: CliRunner, project_factory: Callable[..., Path]) -> None:
        root = project_factory({"tokens/a.json": {"spacing": {"a-b": {"$value": 1}, "aB": {"$value": 2}}}})
        result = cli_runner.invoke(app, ["check", *_manifest(root)])
        assert result.exit_code == 1
        assert "collision" in result.output


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "dodada-tokens" in result.output
