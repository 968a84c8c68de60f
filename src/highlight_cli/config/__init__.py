"""Configuration loading and schema definitions."""

from highlight_cli.config.loader import build_config, get_default_palette, load_palette
from highlight_cli.config.schema import Config, HighlightOptions, Palette, PaletteEntry

__all__ = [
    "Config",
    "HighlightOptions",
    "Palette",
    "PaletteEntry",
    "build_config",
    "get_default_palette",
    "load_palette",
]
