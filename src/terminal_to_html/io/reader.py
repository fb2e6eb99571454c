"""Load captured terminal output from disk."""

from pathlib import Path

from terminal_to_html.convert import render, render_text
from terminal_to_html.core.options import RenderOptions


def read_output(path: str | Path) -> bytes:
    """Read a captured log as raw bytes; decoding is left to the guard."""
    return Path(path).read_bytes()


def load(path: str | Path, options: RenderOptions | None = None, **overrides) -> str:
    """
    Render a captured log file to HTML.

    Raises:
        OSError: If the file cannot be read
    """
    return render(read_output(path), options, **overrides)


def load_text(path: str | Path, options: RenderOptions | None = None, **overrides) -> str:
    """Render a captured log file to plain text."""
    return render_text(read_output(path), options, **overrides)
