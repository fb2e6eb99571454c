"""Style values and the SGR state machine that produces them."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum, auto

from terminal_to_html.core.color import Color

logger = logging.getLogger(__name__)


class Attribute(IntEnum):
    """Text attributes toggled by SGR codes 1-9."""
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RAPID_BLINK = 6
    INVERSE = 7
    CONCEAL = 8
    STRIKETHROUGH = 9

    @property
    def css_class(self) -> str:
        return f"term-fg{int(self)}"


# Parameters are clamped the way xterm clamps them.
MAX_PARAM = 65535


def parse_param(text: str, default: int = 0) -> int:
    """Parse one numeric CSI parameter, clamping oversized values."""
    if not text:
        return default
    if len(text.lstrip("0")) > 5:
        return MAX_PARAM
    return min(int(text), MAX_PARAM)


# Attributes cleared by each "off" code (21-29).
_ATTRIBUTE_OFF: dict[int, frozenset[Attribute]] = {
    code: frozenset({Attribute(code - 20)}) for code in range(21, 30)
}
_ATTRIBUTE_OFF[22] = frozenset({Attribute.BOLD, Attribute.FAINT})
_ATTRIBUTE_OFF[25] = frozenset({Attribute.BLINK, Attribute.RAPID_BLINK})


class _Mode(Enum):
    """Where the state machine is inside an extended color sequence."""
    NORMAL = auto()
    GOT_38 = auto()       # waiting for 5 (palette) or 2 (truecolor)
    GOT_48 = auto()
    FG_INDEX = auto()     # waiting for the palette index
    BG_INDEX = auto()
    SKIP = auto()         # discarding truecolor components


@dataclass(frozen=True)
class Style:
    """
    Display style of a cell: foreground, background and attributes.

    Styles are immutable; every SGR instruction produces a new Style.
    Two styles are equal when every component is equal, which is what
    the HTML renderer relies on to merge runs of cells.
    """
    fg: Color | None = None
    bg: Color | None = None
    attributes: frozenset[Attribute] = field(default_factory=frozenset)

    @property
    def is_plain(self) -> bool:
        """True if this style carries no styling at all."""
        return self.fg is None and self.bg is None and not self.attributes

    def css_classes(self) -> list[str]:
        """CSS classes for this style: foreground, background, attributes."""
        classes: list[str] = []
        if self.fg is not None:
            classes.append(self.fg.css_class())
        if self.bg is not None:
            classes.append(self.bg.css_class(background=True))
        classes.extend(attr.css_class for attr in sorted(self.attributes))
        return classes

    def apply(self, params: str) -> "Style":
        """
        Apply the parameter list of an SGR (``ESC [ ... m``) sequence.

        Parameters are applied in order as if each had been issued on its
        own. An empty list, or a lone ``0``, resets everything. Codes that
        are not understood are ignored.
        """
        if params in ("", "0"):
            return PLAIN

        style = self
        mode = _Mode.NORMAL
        skip = 0

        for part in params.split(";"):
            if not part:
                continue
            code = parse_param(part)

            if mode == _Mode.GOT_38 or mode == _Mode.GOT_48:
                if code == 5:
                    mode = _Mode.FG_INDEX if mode == _Mode.GOT_38 else _Mode.BG_INDEX
                elif code == 2:
                    mode = _Mode.SKIP
                    skip = 3
                else:
                    mode = _Mode.NORMAL
                continue
            if mode == _Mode.FG_INDEX or mode == _Mode.BG_INDEX:
                if code <= 255:
                    color = Color.from_256(code)
                    if mode == _Mode.FG_INDEX:
                        style = replace(style, fg=color)
                    else:
                        style = replace(style, bg=color)
                mode = _Mode.NORMAL
                continue
            if mode == _Mode.SKIP:
                skip -= 1
                if skip == 0:
                    mode = _Mode.NORMAL
                continue

            if code == 0:
                style = PLAIN
            elif 1 <= code <= 9:
                style = replace(style, attributes=style.attributes | {Attribute(code)})
            elif code in _ATTRIBUTE_OFF:
                style = replace(style, attributes=style.attributes - _ATTRIBUTE_OFF[code])
            elif 30 <= code <= 37 or 90 <= code <= 97:
                style = replace(style, fg=Color.from_sgr(code))
            elif 40 <= code <= 47 or 100 <= code <= 107:
                style = replace(style, bg=Color.from_sgr(code))
            elif code == 38:
                mode = _Mode.GOT_38
            elif code == 48:
                mode = _Mode.GOT_48
            elif code == 39:
                style = replace(style, fg=None)
            elif code == 49:
                style = replace(style, bg=None)
            elif code != 10:
                logger.debug("Ignoring unsupported SGR code %d", code)

        return style


PLAIN = Style()
