"""Shared constants for terminal output processing."""

# ANSI escape sequences
ESC = "\x1b"

# Final characters of the control sequences that are understood.
# m: SGR, K/k: erase in line, G/g: column reset, A-D/a-d: cursor motion
SEQUENCE_COMMANDS = "mKkGgAaBbCcDd"

MEGABYTE = 1024 * 1024

# Input limits
DEFAULT_MAX_SIZE = 4 * MEGABYTE
DEFAULT_MAX_LINE_LENGTH = 50_000

# Appended when the whole input is over the size limit
SIZE_NOTICE = (
    "\n\nWarning: Terminal has chopped off the rest of the build as it's "
    "over the allowed {limit} limit for logs."
)

# Appended to each line over the line length limit
LINE_NOTICE = (
    " Warning: Terminal has chopped the rest of this line off as it's "
    "over the allowed {limit} characters per line limit."
)

# Rendered in place of a row with no cells
EMPTY_ROW = "&nbsp;"
