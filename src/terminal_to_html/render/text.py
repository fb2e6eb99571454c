"""Render a replayed screen to plain text (strip colors)."""

from terminal_to_html.core.screen import Screen


class TextRenderer:
    """Render a Screen to plain text without any styling."""

    def render(self, screen: Screen) -> str:
        """Render screen to plain text, dropping trailing blanks and empty rows."""
        lines = [line.rstrip() for line in screen.to_lines()]
        return '\n'.join(lines).rstrip('\n')
