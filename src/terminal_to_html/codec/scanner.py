"""Escape scanner - split terminal output into tokens."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from terminal_to_html.core.constants import ESC, SEQUENCE_COMMANDS


class TokenKind(Enum):
    """What a token is."""
    LITERAL = "literal"      # a single printable (or unknown) character
    CONTROL = "control"      # \n, \r or \b
    SEQUENCE = "sequence"    # a complete ESC [ params command


@dataclass(frozen=True)
class Token:
    """
    One unit of terminal output.

    For sequences, ``params`` is the raw parameter string (digits and
    semicolons, possibly empty) and ``command`` the final character.
    """
    kind: TokenKind
    text: str
    params: str = ""
    command: str = ""


CONTROL_CHARACTERS = "\n\r\b"

# Rules are tried in order at each position; the first match wins.
CONTROL_PATTERN = re.compile(r'[\n\r\b]')
SEQUENCE_PATTERN = re.compile(r'\x1b\[([0-9;]*)([' + SEQUENCE_COMMANDS + r'])')

RULES: tuple[tuple[TokenKind, re.Pattern[str]], ...] = (
    (TokenKind.CONTROL, CONTROL_PATTERN),
    (TokenKind.SEQUENCE, SEQUENCE_PATTERN),
)


def scan(text: str) -> Iterator[Token]:
    """
    Lazily tokenize ``text``.

    Anything that no rule matches, including an ESC that does not start
    a complete recognised sequence, comes out as a single-character
    LITERAL token. No input is ever dropped.
    """
    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        # Fast path: most characters are plain text
        if char != ESC and char not in CONTROL_CHARACTERS:
            yield Token(TokenKind.LITERAL, char)
            i += 1
            continue

        for kind, pattern in RULES:
            match = pattern.match(text, i)
            if match:
                if kind == TokenKind.SEQUENCE:
                    yield Token(kind, match.group(0), match.group(1), match.group(2))
                else:
                    yield Token(kind, match.group(0))
                i = match.end()
                break
        else:
            yield Token(TokenKind.LITERAL, char)
            i += 1


class Scanner:
    """
    Re-iterable token stream over a piece of text.

    Holds no state between iterations, so it can be scanned any number
    of times with the same result.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        return scan(self.text)
