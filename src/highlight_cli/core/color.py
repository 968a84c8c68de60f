"""24-bit ANSI color resolution and preset assignment."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from highlight_cli.config.schema import Palette

ESC = "\033"

# Terminates every colorized span
RESET = f"{ESC}[0m".encode("ascii")

# SGR selectors for 24-bit color
FOREGROUND = 38
BACKGROUND = 48

_HEX_DIGITS = frozenset(string.hexdigits)


class RGB(NamedTuple):
    """A concrete 24-bit color."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class ColorCode:
    """An RGB triple bound to a foreground or background rendering mode.

    Attributes:
        rgb: The color to render
        background: Render as background (SGR 48) instead of foreground (SGR 38)
    """

    rgb: RGB
    background: bool = False

    @property
    def sequence(self) -> bytes:
        """ANSI escape sequence that switches to this color."""
        selector = BACKGROUND if self.background else FOREGROUND
        red, green, blue = self.rgb
        return f"{ESC}[{selector};2;{red};{green};{blue}m".encode("ascii")

    def wrap(self, text: bytes) -> bytes:
        """Wrap text in this color followed by a reset."""
        return self.sequence + text + RESET


def parse_hex(value: str) -> RGB | None:
    """Parse a 6-digit hex color, with or without a leading '#'.

    Args:
        value: Hex string like "FF5500" or "#ff5500"

    Returns:
        RGB triple, or None if the string is not exactly six hex digits

    Examples:
        >>> parse_hex("#FF5500")
        RGB(red=255, green=85, blue=0)
        >>> parse_hex("F50") is None
        True
    """
    digits = value.removeprefix("#")
    if len(digits) != 6 or not all(c in _HEX_DIGITS for c in digits):
        return None
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def resolve_color(token: str, palette: Palette) -> RGB | None:
    """Resolve a color token to RGB.

    Palette names are matched case-insensitively; anything else must be a
    6-digit hex string.

    Args:
        token: Named color or hex string
        palette: Preset palette to look names up in

    Returns:
        RGB triple, or None if the token cannot be resolved
    """
    entry = palette.get(token)
    if entry is not None:
        return entry.rgb
    return parse_hex(token)


def reserve_colors(tokens: Iterable[str | None], palette: Palette) -> frozenset[int]:
    """Collect palette slots claimed by explicit color requests.

    A hex token that happens to equal a preset's RGB claims that preset too.

    Args:
        tokens: Explicit color tokens in declaration order (None for auto)
        palette: Preset palette

    Returns:
        Indices of claimed palette entries
    """
    claimed: set[int] = set()
    for token in tokens:
        if not token:
            continue
        rgb = resolve_color(token, palette)
        if rgb is None:
            continue
        index = palette.index_of_rgb(rgb)
        if index is not None:
            claimed.add(index)
    return frozenset(claimed)


def next_auto_color(claimed: frozenset[int], palette: Palette) -> tuple[int, frozenset[int]]:
    """Pick the next preset color for a word without an explicit color.

    Presets are handed out in palette order, skipping claimed slots. Once
    every slot is claimed, the first entry is returned again and the claimed
    set is left as is.

    Args:
        claimed: Palette indices already in use
        palette: Preset palette

    Returns:
        Tuple of (palette index, updated claimed set)
    """
    for index in range(len(palette)):
        if index not in claimed:
            return index, claimed | {index}
    return 0, claimed
