"""Core data structures for the virtual terminal."""

from terminal_to_html.core.cell import BLANK, Cell
from terminal_to_html.core.color import Color, ColorMode
from terminal_to_html.core.options import RenderOptions
from terminal_to_html.core.screen import Screen
from terminal_to_html.core.style import PLAIN, Attribute, Style

__all__ = [
    "BLANK",
    "Cell",
    "Color",
    "ColorMode",
    "RenderOptions",
    "Screen",
    "PLAIN",
    "Attribute",
    "Style",
]
