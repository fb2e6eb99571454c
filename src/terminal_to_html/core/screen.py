"""Screen - virtual terminal buffer that terminal output is replayed onto."""

from dataclasses import dataclass, field
from typing import Iterator

from terminal_to_html.core.cell import BLANK, Cell
from terminal_to_html.core.style import PLAIN, Style

# Erase-in-line modes (ESC [ n K)
ERASE_TO_END = 0
ERASE_TO_START = 1
ERASE_ALL = 2


@dataclass
class Screen:
    """
    A growable grid of Cells with a cursor.

    Rows are created lazily when something is written to them, and a
    row is only ever as long as what was written (or erased) on it.
    Moving the cursor never grows the buffer by itself.

    ``max_width`` optionally bounds how far relative cursor motion can
    push the cursor to the right, so a single sequence cannot force
    unbounded padding.
    """
    max_width: int | None = None
    _buffer: list[list[Cell]] = field(default_factory=list)
    _x: int = 0
    _y: int = 0

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        self._x = value if value > 0 else 0

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        self._y = value if value > 0 else 0

    def ensure_row(self, row: int) -> list[Cell]:
        """Ensure the buffer has this row (0-indexed) and return it."""
        while len(self._buffer) <= row:
            self._buffer.append([])
        return self._buffer[row]

    def write(self, char: str, style: Style = PLAIN) -> None:
        """Write a character at the cursor and advance it by one column."""
        line = self.ensure_row(self._y)
        gap = self._x - len(line)
        if gap > 0:
            line.extend([BLANK] * gap)

        cell = Cell(char, style)
        if self._x < len(line):
            line[self._x] = cell
        else:
            line.append(cell)
        self._x += 1

    def newline(self) -> None:
        """Move to the start of the next row."""
        self._x = 0
        self._y += 1

    def carriage_return(self) -> None:
        """Move to the start of the current row."""
        self._x = 0

    def backspace(self) -> None:
        """Move back one column. Nothing is erased."""
        self.x = self._x - 1

    def up(self, count: int = 1) -> None:
        """Move the cursor up, stopping at the first row."""
        self.y = self._y - count

    def down(self, count: int = 1) -> bool:
        """
        Move the cursor down, but only onto a row that already exists.

        Returns False (and leaves the cursor alone) otherwise.
        """
        target = self._y + count
        if target >= len(self._buffer):
            return False
        self.y = target
        return True

    def forward(self, count: int = 1) -> None:
        """Move the cursor right."""
        target = self._x + count
        if self.max_width is not None:
            target = min(target, max(self.max_width, self._x))
        self.x = target

    def backward(self, count: int = 1) -> None:
        """Move the cursor left, stopping at the first column."""
        self.x = self._x - count

    def column_reset(self) -> None:
        """Move the cursor to column 0 (ESC [ G)."""
        self._x = 0

    def erase_line(self, mode: int = ERASE_TO_END) -> None:
        """
        Erase part of the current row (ESC [ n K).

        Erased cells are replaced by unstyled blanks. Erasing a row that
        has never been written to does nothing.
        """
        if self._y >= len(self._buffer):
            return
        line = self._buffer[self._y]

        if mode == ERASE_TO_END:
            if self._x < len(line):
                line[self._x:] = [BLANK] * (len(line) - self._x)
        elif mode == ERASE_TO_START:
            end = self._x + 1
            if end > len(line):
                line.extend([BLANK] * (end - len(line)))
            line[:end] = [BLANK] * end
        elif mode == ERASE_ALL:
            line.clear()

    @property
    def current_height(self) -> int:
        """Get the current number of rows in the buffer."""
        return len(self._buffer)

    def row(self, y: int) -> list[Cell]:
        """Get a copy of row ``y`` (empty if it does not exist)."""
        if 0 <= y < len(self._buffer):
            return list(self._buffer[y])
        return []

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def to_lines(self) -> list[str]:
        """Characters of each row, without styling."""
        return [''.join(cell.char for cell in line) for line in self._buffer]
