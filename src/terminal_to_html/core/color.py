"""Color representation for terminal output."""

from dataclasses import dataclass
from enum import Enum


class ColorMode(Enum):
    """Palette a color was selected from.

    The value is the infix used in CSS class names (``term-fg32``,
    ``term-fgi92``, ``term-fgx169``).
    """
    BASE = ""        # SGR 30-37, 40-47
    INTENSE = "i"    # SGR 90-97, 100-107
    EXTENDED = "x"   # SGR 38;5;n, 48;5;n


@dataclass(frozen=True)
class Color:
    """
    A foreground or background color.

    The same Color value is used for both layers; the layer is only
    chosen when the color is turned into a class name.
    """
    mode: ColorMode
    value: int

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37, 40-47, 90-97, 100-107)."""
        if 30 <= code <= 37:
            return cls(ColorMode.BASE, code - 30)
        elif 40 <= code <= 47:
            return cls(ColorMode.BASE, code - 40)
        elif 90 <= code <= 97:
            return cls(ColorMode.INTENSE, code - 90)
        elif 100 <= code <= 107:
            return cls(ColorMode.INTENSE, code - 100)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color palette index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED, index)

    def code(self, background: bool = False) -> int:
        """Return the number shown in class names for this color."""
        if self.mode == ColorMode.BASE:
            return (40 if background else 30) + self.value
        elif self.mode == ColorMode.INTENSE:
            return (100 if background else 90) + self.value
        return self.value

    def css_class(self, background: bool = False) -> str:
        """Return the CSS class for this color, e.g. ``term-bgx50``."""
        layer = "bg" if background else "fg"
        return f"term-{layer}{self.mode.value}{self.code(background)}"
