"""Configuration loading."""

from __future__ import annotations

from functools import lru_cache

import yaml

from highlight_cli.config.defaults import DEFAULT_PALETTE_YAML
from highlight_cli.config.schema import Config, HighlightOptions, Palette


def load_palette(yaml_string: str | None = None) -> Palette:
    """Load a palette from a YAML document.

    Args:
        yaml_string: YAML with a top-level 'palette' list (default: built-in presets)

    Returns:
        Validated palette
    """
    if yaml_string is None:
        yaml_string = DEFAULT_PALETTE_YAML
    data = yaml.safe_load(yaml_string)
    return Palette(colors=(data or {}).get("palette", []))


@lru_cache(maxsize=1)
def get_default_palette() -> Palette:
    """Get the built-in preset palette."""
    return load_palette()


def build_config(
    words: list[str],
    case_sensitive: bool = False,
    whole_word: bool = False,
    background: bool = False,
    palette: Palette | None = None,
) -> Config:
    """Assemble the configuration for one run.

    Args:
        words: Highlight rules in 'word' or 'word::color' form
        case_sensitive: Match terms case-sensitively
        whole_word: Extend matches to surrounding whitespace
        background: Color the background instead of the text
        palette: Preset palette (default: built-in presets)

    Returns:
        Configuration object
    """
    return Config(
        options=HighlightOptions(
            case_sensitive=case_sensitive,
            whole_word=whole_word,
            background=background,
        ),
        palette=palette if palette is not None else get_default_palette(),
        words=list(words),
    )
