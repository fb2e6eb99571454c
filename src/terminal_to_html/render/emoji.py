"""
Pictographic symbol substitution.

Rendered HTML can optionally have emoji replaced by image markup. The
replacement comes from any ``Mapping`` of character to markup; a missing
entry leaves the character as it is. ``EmojiTable`` is a ready-made
mapping that builds ``<img>`` tags from Unicode character names.
"""

import html
import posixpath
import re
import threading
import unicodedata
from collections.abc import Iterator, Mapping

# Emoticons, pictographs, transport, supplemental symbols and dingbats
EMOJI_PATTERN = re.compile(
    '[\U0001F300-\U0001F5FF'
    '\U0001F600-\U0001F64F'
    '\U0001F680-\U0001F6FF'
    '\U0001F900-\U0001F9FF'
    '\u2702-\u27b0]'
)

# These look better (and keep their color) as text
EMOJI_IGNORE = frozenset({"heavy_check_mark", "heavy_multiplication_x"})

DEFAULT_ASSET_PATH = "/assets/emojis"


def substitute_symbols(text: str, table: Mapping[str, str]) -> str:
    """Replace each pictographic character found in ``table``."""
    def replace(match: re.Match[str]) -> str:
        char = match.group(0)
        fragment = table.get(char)
        return char if fragment is None else fragment

    return EMOJI_PATTERN.sub(replace, text)


def emoji_name(char: str) -> str | None:
    """Short name for an emoji, e.g. ``thumbs_up_sign``."""
    if len(char) != 1:
        return None
    name = unicodedata.name(char, "")
    if not name:
        return None
    return name.lower().replace(" ", "_").replace("-", "_")


class EmojiTable(Mapping[str, str]):
    """
    Read-only mapping from an emoji character to an ``<img>`` tag.

    Entries are built on first lookup and memoised. The cache is
    populated under a lock, so one table can be shared between threads
    rendering at the same time.

    Args:
        asset_path: URL prefix the images are served from
        ignore: Emoji names to leave as text
    """

    def __init__(
        self,
        asset_path: str = DEFAULT_ASSET_PATH,
        ignore: frozenset[str] = EMOJI_IGNORE,
    ):
        self.asset_path = asset_path
        self.ignore = ignore
        self._cache: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def __getitem__(self, char: str) -> str:
        try:
            fragment = self._cache[char]
        except KeyError:
            fragment = self._build(char)
            with self._lock:
                fragment = self._cache.setdefault(char, fragment)
        if fragment is None:
            raise KeyError(char)
        return fragment

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            found = [char for char, fragment in self._cache.items() if fragment is not None]
        return iter(found)

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for fragment in self._cache.values() if fragment is not None)

    def _build(self, char: str) -> str | None:
        if not EMOJI_PATTERN.fullmatch(char):
            return None
        name = emoji_name(char)
        if name is None or name in self.ignore:
            return None

        alt = html.escape(f":{name}:")
        src = html.escape(posixpath.join(self.asset_path, "unicode", f"{ord(char):x}.png"))
        return (
            f'<img alt="{alt}" title="{alt}" src="{src}" '
            f'class="emoji" width="20" height="20" />'
        )
