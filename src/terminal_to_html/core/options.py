"""Options controlling a render."""

from collections.abc import Mapping
from dataclasses import dataclass

from terminal_to_html.core.constants import DEFAULT_MAX_LINE_LENGTH, DEFAULT_MAX_SIZE


@dataclass(frozen=True)
class RenderOptions:
    """
    Settings for one call to ``render``.

    Attributes:
        max_size: Total input size limit in bytes (UTF-8).
        max_line_length: Per-line limit in characters.
        symbols: Optional table mapping a pictographic character to the
            markup that should replace it in the output.
    """
    max_size: int = DEFAULT_MAX_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    symbols: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        for name in ("max_size", "max_line_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
