"""ANSI escape sequence parser with virtual terminal emulation."""

import logging

from terminal_to_html.codec.scanner import Token, TokenKind, scan
from terminal_to_html.core.screen import Screen
from terminal_to_html.core.style import PLAIN, Style, parse_param

logger = logging.getLogger(__name__)


class AnsiParser:
    """
    Replays terminal output onto a Screen.

    SGR sequences update the current style; everything else moves the
    cursor or changes the screen. Each written cell is stamped with the
    style that was current at the time.
    """

    def __init__(self, max_width: int | None = None):
        self.screen = Screen(max_width=max_width)
        self.style: Style = PLAIN

    def feed(self, text: str) -> None:
        """Process guarded text into the screen."""
        for token in scan(text):
            self.handle(token)

    def handle(self, token: Token) -> None:
        """Apply a single token."""
        if token.kind == TokenKind.LITERAL:
            self.screen.write(token.text, self.style)
        elif token.kind == TokenKind.CONTROL:
            if token.text == '\n':
                self.screen.newline()
            elif token.text == '\r':
                self.screen.carriage_return()
            else:
                self.screen.backspace()
        else:
            self._handle_csi(token.params, token.command)

    def _handle_csi(self, params: str, command: str) -> None:
        """Handle a CSI escape sequence."""
        if command == 'm':
            self.style = self.style.apply(params)
            return

        # Only the first parameter matters for the remaining commands
        first = params.split(';', 1)[0]

        if command in ('K', 'k'):
            self.screen.erase_line(parse_param(first, default=0))
        elif command in ('G', 'g'):
            self.screen.column_reset()
        elif command == 'A':
            self.screen.up(parse_param(first, default=1))
        elif command == 'B':
            if not self.screen.down(parse_param(first, default=1)):
                logger.debug("Ignoring cursor down past the last row")
        elif command == 'C':
            self.screen.forward(parse_param(first, default=1))
        elif command == 'D':
            self.screen.backward(parse_param(first, default=1))
        # Lower-case a-d are recognised but have no effect

    def append_notice(self, text: str) -> None:
        """
        Write unstyled ``text`` starting from the last row of the screen.

        The cursor is first moved down to the last row, so the notice
        always ends up below what was already drawn.
        """
        self.screen.y = max(self.screen.y, self.screen.current_height - 1)
        self.style = PLAIN
        self.feed(text)

    def get_screen(self) -> Screen:
        """Get the resulting screen."""
        return self.screen
