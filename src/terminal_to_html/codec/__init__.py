"""Input guarding, tokenizing and replay of terminal output."""

from terminal_to_html.codec.ansi_parser import AnsiParser
from terminal_to_html.codec.guard import GuardedInput, guard, guard_input, limit_line_length
from terminal_to_html.codec.scanner import Scanner, Token, TokenKind, scan

__all__ = [
    "AnsiParser",
    "GuardedInput",
    "guard",
    "guard_input",
    "limit_line_length",
    "Scanner",
    "Token",
    "TokenKind",
    "scan",
]
