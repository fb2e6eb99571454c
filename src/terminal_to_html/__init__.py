"""
terminal-to-html: render terminal output as HTML

Replays captured terminal output (text mixed with ANSI escape sequences)
onto a virtual screen and turns the result into compact, styled HTML.

Quick Start:
    >>> import terminal_to_html as terminal
    >>> terminal.render("\\x1b[32mok\\x1b[0m")
    '<span class="term-fg32">ok</span>'
    >>> html = terminal.load("build.log")

Features:
    - Carriage return overwrites, backspace, cursor motion, line erase
    - 8, 16 and 256 color palettes plus bold, italic, underline, etc.
    - Minimal markup: one span per run of identically styled cells
    - Size and line-length limits with inline truncation notices
    - Optional emoji to image substitution
"""

__version__ = "0.1.0"

# Core types
from terminal_to_html.core.cell import Cell
from terminal_to_html.core.color import Color
from terminal_to_html.core.options import RenderOptions
from terminal_to_html.core.screen import Screen
from terminal_to_html.core.style import Style

# Conversion
from terminal_to_html.convert import render, render_text, replay
from terminal_to_html.io.reader import load, load_text

# Rendering
from terminal_to_html.render.emoji import EmojiTable
from terminal_to_html.render.html import HtmlRenderer
from terminal_to_html.render.preview import wrap_preview

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "RenderOptions",
    "Screen",
    "Style",
    # Conversion
    "render",
    "render_text",
    "replay",
    "load",
    "load_text",
    # Rendering
    "EmojiTable",
    "HtmlRenderer",
    "wrap_preview",
]
