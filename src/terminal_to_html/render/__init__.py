"""Renderers for outputting a replayed screen to various formats."""

from terminal_to_html.render.emoji import EmojiTable, substitute_symbols
from terminal_to_html.render.html import HtmlRenderer
from terminal_to_html.render.preview import wrap_preview
from terminal_to_html.render.text import TextRenderer

__all__ = ["EmojiTable", "substitute_symbols", "HtmlRenderer", "wrap_preview", "TextRenderer"]
