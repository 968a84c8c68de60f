"""Core functionality: color resolution, word table, and line matcher."""

from highlight_cli.core.color import RESET, RGB, ColorCode, parse_hex, resolve_color
from highlight_cli.core.matcher import LineColorizer, Match, colorize
from highlight_cli.core.words import (
    ResolvedWord,
    WordSpec,
    build_word_table,
    parse_word_spec,
    parse_word_specs,
)

__all__ = [
    "RESET",
    "RGB",
    "ColorCode",
    "parse_hex",
    "resolve_color",
    "LineColorizer",
    "Match",
    "colorize",
    "ResolvedWord",
    "WordSpec",
    "build_word_table",
    "parse_word_spec",
    "parse_word_specs",
]
