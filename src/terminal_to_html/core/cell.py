"""Cell - atomic unit of the virtual screen."""

from dataclasses import dataclass

from terminal_to_html.core.style import PLAIN, Style


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character position with the style it was written in.

    Cells are values: a cell written in red stays red no matter what
    style changes happen afterwards.
    """
    char: str = ' '
    style: Style = PLAIN


BLANK = Cell()
