"""Tests for the selector-builder CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selector_builder import __version__
from selector_builder.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compose CSS selectors" in result.output
        assert "build" in result.output
        assert "rectangle" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_simple_selector(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_combined_selector(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build",
                "element=div",
                "id=main",
                "combine=+",
                "element=table",
                "combine=~",
                "element=tr",
                "combine=descendant",
                "element=td",
            ],
        )
        assert result.exit_code == 0
        assert result.output == "div#main + table ~ tr   td\n"

    def test_literal_space_combinator(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=ul", "combine= ", "element=li"])
        assert result.exit_code == 0
        assert result.output == "ul   li\n"

    def test_order_violation(self) -> None:
        result = CliRunner().invoke(cli, ["build", "class=x", "id=y"])
        assert result.exit_code == 1
        assert "Selector parts should be arranged" in result.output

    def test_duplicate_part(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=a", "element=b"])
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_strict_rejects_combinator(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "--strict", "element=a", "combine=|", "element=b"]
        )
        assert result.exit_code == 1
        assert "Invalid combinator" in result.output

    def test_permissive_accepts_combinator(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=a", "combine=|", "element=b"])
        assert result.exit_code == 0
        assert result.output == "a | b\n"

    def test_malformed_step(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_unknown_kind(self) -> None:
        result = CliRunner().invoke(cli, ["build", "tag=a"])
        assert result.exit_code == 2
        assert "unknown kind" in result.output

    def test_requires_steps(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2

    def test_verbose(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "build", "element=a"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# rectangle command
# ---------------------------------------------------------------------------


class TestRectangleCommand:
    def test_area(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert result.output == "200\n"

    def test_json(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "10", "20", "--json"])
        assert result.exit_code == 0
        assert result.output == '{"width":10.0,"height":20.0}\n'
