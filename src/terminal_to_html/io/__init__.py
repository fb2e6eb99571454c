"""File I/O for captured terminal output."""

from terminal_to_html.io.reader import load, load_text, read_output

__all__ = ["load", "load_text", "read_output"]
