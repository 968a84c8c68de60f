"""Highlight rule parsing and word table construction."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from highlight_cli.core.color import ColorCode, next_auto_color, reserve_colors, resolve_color
from highlight_cli.core.matcher import fold_case

if TYPE_CHECKING:
    from highlight_cli.config.schema import Palette

# Separates a term from its color in a rule argument
COLOR_SEPARATOR = "::"


@dataclass(frozen=True)
class WordSpec:
    """A highlight rule as requested by the user.

    Attributes:
        term: Literal text to search for
        color_token: Named color or hex string (None for auto-assignment)
    """

    term: bytes
    color_token: str | None = None


@dataclass(frozen=True)
class ResolvedWord:
    """Matching configuration for one highlight rule.

    Attributes:
        original: The term as typed
        search_key: Term used for matching (lower-cased unless case-sensitive)
        color: Rendering code for matches of this term
        palette_name: Preset name when the color is a palette entry; kept for
            inspecting a built table, matching never reads it
    """

    original: bytes
    search_key: bytes
    color: ColorCode
    palette_name: str | None = None


def parse_word_spec(arg: str) -> WordSpec:
    """Parse a 'word' or 'word::color' argument.

    Only an argument with exactly one separator and a non-empty color part
    carries a color; the term is always the text before the first separator.

    Examples:
        >>> parse_word_spec("error::red")
        WordSpec(term=b'error', color_token='red')
        >>> parse_word_spec("warning::")
        WordSpec(term=b'warning', color_token=None)
    """
    parts = arg.split(COLOR_SEPARATOR)
    color_token = None
    if len(parts) == 2 and parts[1]:
        color_token = parts[1]
    return WordSpec(term=os.fsencode(parts[0]), color_token=color_token)


def parse_word_specs(args: Iterable[str]) -> list[WordSpec]:
    """Parse a list of rule arguments."""
    return [parse_word_spec(arg) for arg in args]


def build_word_table(
    specs: Iterable[WordSpec],
    case_sensitive: bool = False,
    background: bool = False,
    palette: Palette | None = None,
) -> tuple[ResolvedWord, ...]:
    """Build the word table used for matching.

    Explicit colors are reserved in a first pass so that auto-assigned
    presets never collide with them, even when the explicit rule comes later.
    Invalid colors produce a warning and fall back to the next preset.

    Args:
        specs: Highlight rules in declaration order
        case_sensitive: Keep search keys as typed instead of lower-casing them
        background: Render colors as background instead of foreground
        palette: Preset palette (default: built-in presets)

    Returns:
        Resolved words in declaration order, empty terms skipped
    """
    if palette is None:
        from highlight_cli.config.loader import get_default_palette

        palette = get_default_palette()

    specs = [spec for spec in specs if spec.term]
    claimed = reserve_colors((spec.color_token for spec in specs), palette)

    table: list[ResolvedWord] = []
    for spec in specs:
        rgb = None
        if spec.color_token:
            rgb = resolve_color(spec.color_token, palette)
            if rgb is None:
                print(
                    f"Warning: invalid color '{spec.color_token}' for word "
                    f"'{os.fsdecode(spec.term)}', using preset",
                    file=sys.stderr,
                )

        if rgb is None:
            index, claimed = next_auto_color(claimed, palette)
            rgb = palette[index].rgb

        index = palette.index_of_rgb(rgb)
        table.append(
            ResolvedWord(
                original=spec.term,
                search_key=spec.term if case_sensitive else fold_case(spec.term),
                color=ColorCode(rgb=rgb, background=background),
                palette_name=palette[index].name if index is not None else None,
            )
        )

    return tuple(table)
