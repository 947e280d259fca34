"""Tests for the cssfmt CLI commands."""
from __future__ import annotations

import warnings

from click.testing import CliRunner

from cssfmt import __version__
from cssfmt.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "format" in result.output
        assert "minify" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag_accepted(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "format"], input="a{}")
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# format command
# ---------------------------------------------------------------------------


class TestFormatCommand:
    def test_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format"], input="a{color:red}")
        assert result.exit_code == 0
        assert result.stdout == "a {\n\tcolor: red;\n}\n"

    def test_file(self, tmp_path) -> None:
        path = tmp_path / "style.css"
        path.write_text("a{}b{}", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", str(path)])
        assert result.exit_code == 0
        assert result.stdout == "a {}\n\nb {}\n"

    def test_tab_size(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "--tab-size", "2"], input="a{b:c}")
        assert result.exit_code == 0
        assert result.stdout == "a {\n  b: c;\n}\n"

    def test_stdin_read_without_deprecation_warning(self) -> None:
        runner = CliRunner()
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            result = runner.invoke(cli, ["format"], input="a{}")
        assert result.exit_code == 0
        assert result.exception is None

    def test_nesting_too_deep(self, tmp_path) -> None:
        path = tmp_path / "deep.css"
        path.write_text("a{" * 5000, encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", str(path)])
        assert result.exit_code == 1
        assert "nest too deeply" in result.output

    def test_bad_tab_size(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "--tab-size", "0"], input="a{}")
        assert result.exit_code == 2
        assert "tab_size must be at least 1" in result.output

    def test_minify_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "--minify"], input="a { b: c }")
        assert result.stdout == "a{b:c}\n"

    def test_empty_input(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format"], input="")
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["format", str(tmp_path / "nope.css")])
        assert result.exit_code == 2

    def test_write(self, tmp_path) -> None:
        path = tmp_path / "style.css"
        path.write_text("a{b:c}", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "--write", str(path)])
        assert result.exit_code == 0
        assert path.read_text(encoding="utf-8") == "a {\n\tb: c;\n}\n"
        assert "Formatted" in result.output

    def test_write_leaves_formatted_file_alone(self, tmp_path) -> None:
        path = tmp_path / "style.css"
        path.write_text("a {}\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "-w", str(path)])
        assert result.exit_code == 0
        assert "Formatted" not in result.output


# ---------------------------------------------------------------------------
# format --check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_formatted_file_passes(self, tmp_path) -> None:
        path = tmp_path / "ok.css"
        path.write_text("a {\n\tb: c;\n}\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "--check", str(path)])
        assert result.exit_code == 0
        assert "OK: 1 file(s) already formatted" in result.output

    def test_unformatted_file_fails(self, tmp_path) -> None:
        ok = tmp_path / "ok.css"
        ok.write_text("a {}\n", encoding="utf-8")
        bad = tmp_path / "bad.css"
        bad.write_text("a{b:c}", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "--check", str(ok), str(bad)])
        assert result.exit_code == 1
        assert f"Would reformat {bad}" in result.output
        assert str(ok) not in result.output

    def test_check_does_not_write(self, tmp_path) -> None:
        path = tmp_path / "bad.css"
        path.write_text("a{b:c}", encoding="utf-8")
        runner = CliRunner()
        runner.invoke(cli, ["format", "--check", "--write", str(path)])
        assert path.read_text(encoding="utf-8") == "a{b:c}"


# ---------------------------------------------------------------------------
# minify command
# ---------------------------------------------------------------------------


class TestMinifyCommand:
    def test_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["minify"], input="a {\n\tb: c;\n}\n")
        assert result.exit_code == 0
        assert result.stdout == "a{b:c}\n"

    def test_files_are_concatenated(self, tmp_path) -> None:
        first = tmp_path / "a.css"
        first.write_text("a { b: c }", encoding="utf-8")
        second = tmp_path / "b.css"
        second.write_text("d { e: f }", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["minify", str(first), str(second)])
        assert result.stdout == "a{b:c}d{e:f}\n"

    def test_output_file(self, tmp_path) -> None:
        source = tmp_path / "in.css"
        source.write_text("a { b: c }", encoding="utf-8")
        target = tmp_path / "out.css"
        runner = CliRunner()
        result = runner.invoke(cli, ["minify", str(source), "-o", str(target)])
        assert result.exit_code == 0
        assert result.stdout == ""
        assert target.read_text(encoding="utf-8") == "a{b:c}"

    def test_nesting_too_deep(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["minify"], input="a{" * 5000)
        assert result.exit_code == 1
        assert "<stdin>" in result.output
