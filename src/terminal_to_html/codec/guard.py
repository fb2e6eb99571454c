"""
Input guard - make raw terminal output safe to replay.

Repairs invalid UTF-8 and enforces the total size and per-line limits.
Oversized input is truncated with an inline notice rather than rejected,
so a huge log still renders as something readable.
"""

import logging
from typing import NamedTuple

from terminal_to_html.core.constants import (
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_MAX_SIZE,
    LINE_NOTICE,
    MEGABYTE,
    SIZE_NOTICE,
)

logger = logging.getLogger(__name__)


def describe_size(size: int) -> str:
    """Human wording for a byte limit, as used in the size notice."""
    if size and size % MEGABYTE == 0:
        return f"{size // MEGABYTE} megabyte"
    return f"{size} byte"


def limit_line_length(text: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """
    Cut every line longer than ``max_line_length`` characters.

    The line notice is appended once to each line that was cut; other
    lines are returned untouched.
    """
    if len(text) <= max_line_length:
        return text

    notice = LINE_NOTICE.format(limit=max_line_length)
    lines = text.split("\n")
    cut = 0
    for i, line in enumerate(lines):
        if len(line) > max_line_length:
            lines[i] = line[:max_line_length] + notice
            cut += 1

    if not cut:
        return text
    logger.info("Truncated %d line(s) longer than %d characters", cut, max_line_length)
    return "\n".join(lines)


class GuardedInput(NamedTuple):
    """Guarded text plus the size notice owed after it, if any."""
    text: str
    notice: str = ""


def guard_input(
    raw: bytes | str | None,
    max_size: int = DEFAULT_MAX_SIZE,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> GuardedInput:
    """
    Turn raw output into valid text within the size limits.

    Args:
        raw: Captured terminal output, as bytes or text
        max_size: Total limit in bytes (measured as UTF-8)
        max_line_length: Per-line limit in characters

    Returns:
        The guarded text, with invalid byte sequences replaced by
        U+FFFD, and the size notice when the input was cut. The notice
        is kept apart so it can be placed after everything the text
        draws. This never raises for bad content.
    """
    if not raw:
        return GuardedInput("")

    if isinstance(raw, str):
        # surrogatepass keeps lone surrogates as bytes the decoder replaces
        data = raw.encode("utf-8", errors="surrogatepass")
    else:
        data = bytes(raw)

    truncated = len(data) > max_size
    if truncated:
        cut = max_size
        # Back off to the start of a character that straddles the limit
        while cut > 0 and (data[cut] & 0xC0) == 0x80:
            cut -= 1
        logger.info("Input is %d bytes; truncating to %d", len(data), cut)
        data = data[:cut]

    text = data.decode("utf-8", errors="replace")
    text = limit_line_length(text, max_line_length)

    if truncated:
        return GuardedInput(text, SIZE_NOTICE.format(limit=describe_size(max_size)))
    return GuardedInput(text)


def guard(
    raw: bytes | str | None,
    max_size: int = DEFAULT_MAX_SIZE,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> str:
    """Guarded text with any size notice appended."""
    text, notice = guard_input(raw, max_size, max_line_length)
    return text + notice
