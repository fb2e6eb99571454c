"""Render a replayed screen to HTML."""

from collections.abc import Mapping

from terminal_to_html.core.cell import Cell
from terminal_to_html.core.constants import EMPTY_ROW
from terminal_to_html.core.screen import Screen
from terminal_to_html.core.style import PLAIN, Style
from terminal_to_html.render.emoji import substitute_symbols

HTML_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
    '/': '&#47;',
}

CLOSE_SPAN = '</span>'


class HtmlRenderer:
    """
    Render a Screen to HTML with CSS classes.

    Output is a single string: rows are separated by a newline and each
    run of identically styled cells is wrapped in one
    ``<span class="...">``. Spans never cross a row boundary; a style
    that carries on to the next row is opened again there.

    Args:
        symbols: Optional table of replacement markup for pictographic
            characters, applied to the finished HTML.
    """

    def __init__(self, symbols: Mapping[str, str] | None = None):
        self.symbols = symbols
        self._open_tags: dict[Style, str] = {}

    def render(self, screen: Screen) -> str:
        """Render screen to HTML string."""
        html = '\n'.join(self.render_row(row) for row in screen.rows())
        if self.symbols is not None:
            html = substitute_symbols(html, self.symbols)
        return html

    def render_row(self, row: list[Cell]) -> str:
        """Render one row, closing anything it opens."""
        if not row:
            return EMPTY_ROW

        parts: list[str] = []
        previous = PLAIN

        for cell in row:
            style = cell.style
            if style != previous:
                if not previous.is_plain:
                    parts.append(CLOSE_SPAN)
                if not style.is_plain:
                    parts.append(self._open_tag(style))
                previous = style
            parts.append(HTML_ESCAPES.get(cell.char, cell.char))

        if not previous.is_plain:
            parts.append(CLOSE_SPAN)

        return ''.join(parts)

    def _open_tag(self, style: Style) -> str:
        tag = self._open_tags.get(style)
        if tag is None:
            tag = f'<span class="{" ".join(style.css_classes())}">'
            self._open_tags[style] = tag
        return tag
