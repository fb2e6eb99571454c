"""
Convert captured terminal output to HTML or plain text.

Each call guards the input, replays it onto a fresh Screen and
serializes the result. Nothing is shared between calls except an
optional symbol table supplied by the caller.
"""

import logging
from dataclasses import replace

from terminal_to_html.codec.ansi_parser import AnsiParser
from terminal_to_html.codec.guard import guard_input
from terminal_to_html.core.options import RenderOptions
from terminal_to_html.core.screen import Screen
from terminal_to_html.render.html import HtmlRenderer
from terminal_to_html.render.text import TextRenderer

logger = logging.getLogger(__name__)


def _resolve(options: RenderOptions | None, overrides: dict) -> RenderOptions:
    if options is None:
        return RenderOptions(**overrides)
    if overrides:
        return replace(options, **overrides)
    return options


def replay(raw: bytes | str | None, options: RenderOptions | None = None, **overrides) -> Screen:
    """Guard ``raw`` and replay it onto a new Screen."""
    options = _resolve(options, overrides)
    text, notice = guard_input(raw, options.max_size, options.max_line_length)

    parser = AnsiParser(max_width=options.max_line_length)
    parser.feed(text)
    if notice:
        parser.append_notice(notice)
    screen = parser.get_screen()
    logger.debug("Replayed %d characters onto %d rows", len(text), screen.current_height)
    return screen


def render(raw: bytes | str | None, options: RenderOptions | None = None, **overrides) -> str:
    """
    Render terminal output to HTML.

    Args:
        raw: Captured output, as bytes or text
        options: Limits and symbol table; keyword arguments such as
            ``max_size=...`` override individual settings

    Returns:
        HTML with one line per screen row and ``term-*`` CSS classes on
        styled spans. Empty input gives an empty string.
    """
    options = _resolve(options, overrides)
    screen = replay(raw, options)
    return HtmlRenderer(symbols=options.symbols).render(screen)


def render_text(raw: bytes | str | None, options: RenderOptions | None = None, **overrides) -> str:
    """Render terminal output to plain text, as it would finally appear."""
    return TextRenderer().render(replay(raw, options, **overrides))
