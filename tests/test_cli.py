"""Tests for the command line interface and file loading."""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

import terminal_to_html as terminal
from terminal_to_html.cli.app import create_app

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestLoad:
    """Rendering files from disk."""

    def test_load(self, log_file: Path, sample_log: bytes) -> None:
        assert terminal.load(log_file) == terminal.render(sample_log)

    def test_load_text(self, log_file: Path) -> None:
        assert terminal.load_text(log_file).splitlines()[0] == "$ make test"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            terminal.load(tmp_path / "nope.log")


class TestCli:
    """The terminal-to-html command."""

    def test_renders_file(self, app, log_file: Path, sample_log: bytes) -> None:
        result = runner.invoke(app, [str(log_file)])
        assert result.exit_code == 0
        assert result.stdout == terminal.render(sample_log)

    def test_renders_stdin(self, app) -> None:
        result = runner.invoke(app, [], input=b"\x1b[31mred\x1b[0m\n")
        assert result.exit_code == 0
        assert result.stdout == '<span class="term-fg31">red</span>'

    def test_text_format(self, app, log_file: Path) -> None:
        result = runner.invoke(app, ["--format", "text", str(log_file)])
        assert result.exit_code == 0
        assert "FAIL package/cli" in result.stdout
        assert "<span" not in result.stdout

    def test_preview(self, app) -> None:
        result = runner.invoke(app, ["--preview"], input=b"\x1b[32mok")
        assert result.exit_code == 0
        assert result.stdout.startswith("<!DOCTYPE html>")
        assert '<div class="term-container"><span class="term-fg32">ok</span></div>' in result.stdout
        assert ".term-fgx255" in result.stdout

    def test_limits(self, app) -> None:
        result = runner.invoke(app, ["--max-size", "3"], input=b"abcdef")
        assert result.exit_code == 0
        assert "abc\n&nbsp;\nWarning" in result.stdout

    def test_limits_from_environment(self, app) -> None:
        result = runner.invoke(
            app, [], input=b"abcdef", env={"TERMINAL_TO_HTML_MAX_LINE_LENGTH": "2"},
        )
        assert result.exit_code == 0
        assert "ab Warning" in result.stdout

    def test_negative_limit_is_rejected(self, app) -> None:
        result = runner.invoke(app, ["--max-size", "-1"], input=b"x")
        assert result.exit_code != 0

    def test_emoji(self, app) -> None:
        result = runner.invoke(app, ["--emoji", "--emoji-assets", "/e"], input="ship it 🚀".encode())
        assert result.exit_code == 0
        assert 'src="/e/unicode/1f680.png"' in result.stdout

    def test_stats(self, app, caplog: pytest.LogCaptureFixture) -> None:
        result = runner.invoke(app, ["--stats"], input=b"hello")
        assert result.exit_code == 0
        assert result.stdout.startswith("hello")

        records = [r for r in caplog.records if r.name == "terminal_to_html.cli.app"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        stats = json.loads(records[0].getMessage())
        assert stats["input_bytes"] == 5
        assert stats["output_bytes"] == 5
        assert stats["elapsed_seconds"] >= 0

    def test_no_stats_by_default(self, app, caplog: pytest.LogCaptureFixture) -> None:
        runner.invoke(app, [], input=b"hello")
        assert not [r for r in caplog.records if r.name == "terminal_to_html.cli.app"]

    def test_verbose(self, app, caplog: pytest.LogCaptureFixture) -> None:
        result = runner.invoke(app, ["-v"], input=b"\x1b[31;58mred")
        assert result.exit_code == 0
        assert '<span class="term-fg31">red</span>' in result.stdout
        assert "Ignoring unsupported SGR code 58" in caplog.text

    def test_debug_is_quiet_without_verbose(self, app, caplog: pytest.LogCaptureFixture) -> None:
        result = runner.invoke(app, [], input=b"\x1b[31;58mred")
        assert result.exit_code == 0
        assert "Ignoring unsupported SGR code" not in caplog.text

    def test_missing_file(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "nope.log")])
        assert result.exit_code == 1
