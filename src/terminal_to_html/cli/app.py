"""Typer CLI application."""

import json
import logging
import time
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from terminal_to_html.core.constants import DEFAULT_MAX_LINE_LENGTH, DEFAULT_MAX_SIZE

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """What to write to stdout."""
    HTML = "html"
    TEXT = "text"


def configure_logging(console: Console, verbose: bool) -> None:
    """Send library and CLI logs to stderr through rich."""
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("terminal_to_html")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="terminal-to-html",
        help="Turn terminal output with ANSI escape codes into HTML.",
        rich_markup_mode="rich",
        add_completion=False,
    )
    console = Console(stderr=True)

    @app.command()
    def convert(
        path: Annotated[Optional[Path], typer.Argument(help="Captured output to render (default: stdin)")] = None,
        preview: Annotated[bool, typer.Option("--preview", "-p", help="Wrap output in a standalone HTML page with CSS")] = False,
        output_format: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")] = OutputFormat.HTML,
        max_size: Annotated[int, typer.Option(
            "--max-size", min=0, envvar="TERMINAL_TO_HTML_MAX_SIZE", help="Total input limit in bytes",
        )] = DEFAULT_MAX_SIZE,
        max_line_length: Annotated[int, typer.Option(
            "--max-line-length", min=0, envvar="TERMINAL_TO_HTML_MAX_LINE_LENGTH", help="Per-line limit in characters",
        )] = DEFAULT_MAX_LINE_LENGTH,
        emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Replace emoji with <img> tags")] = False,
        emoji_assets: Annotated[str, typer.Option("--emoji-assets", help="URL prefix for emoji images")] = "/assets/emojis",
        stats: Annotated[bool, typer.Option("--stats", help="Log input/output size and timing to stderr")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ) -> None:
        """Render terminal output from FILE or stdin to stdout."""
        from terminal_to_html.convert import render, render_text
        from terminal_to_html.core.options import RenderOptions
        from terminal_to_html.render.emoji import EmojiTable
        from terminal_to_html.render.preview import wrap_preview

        configure_logging(console, verbose)
        start = time.perf_counter()

        if path is None:
            data = typer.get_binary_stream("stdin").read()
        else:
            try:
                data = path.read_bytes()
            except OSError as e:
                console.print(f"[red]Could not read {path}: {e.strerror or e}[/]")
                raise typer.Exit(1)

        options = RenderOptions(
            max_size=max_size,
            max_line_length=max_line_length,
            symbols=EmojiTable(asset_path=emoji_assets) if emoji else None,
        )

        if output_format == OutputFormat.TEXT:
            output = render_text(data, options)
        else:
            output = render(data, options)
            if preview:
                output = wrap_preview(output)

        typer.echo(output, nl=False)

        if stats:
            logger.info(json.dumps({
                "input_bytes": len(data),
                "output_bytes": len(output.encode("utf-8")),
                "elapsed_seconds": round(time.perf_counter() - start, 6),
            }))

    return app
