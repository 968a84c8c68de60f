"""Pydantic models for run configuration and the preset palette."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from highlight_cli.core.color import RGB, parse_hex


class PaletteEntry(BaseModel):
    """A named preset color."""

    name: str = Field(description="Color name, e.g., 'red'")
    rgb: RGB = Field(description="Color value, given as a 6-digit hex string")

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("rgb", mode="before")
    @classmethod
    def parse_rgb(cls, v: Any) -> Any:
        """Parse hex strings into RGB triples."""
        if isinstance(v, str):
            rgb = parse_hex(v)
            if rgb is None:
                raise ValueError(f"Invalid hex color: {v!r}")
            return rgb
        return v


class Palette(BaseModel):
    """Ordered preset colors.

    Order is the auto-assignment order for words without an explicit color.
    Foreground and background rendering share the same entries.
    """

    colors: list[PaletteEntry] = Field(description="Preset colors in assignment order")

    @field_validator("colors")
    @classmethod
    def check_colors(cls, v: list[PaletteEntry]) -> list[PaletteEntry]:
        if not v:
            raise ValueError("Palette must define at least one color")
        seen: set[str] = set()
        for entry in v:
            if entry.name in seen:
                raise ValueError(f"Duplicate palette color: {entry.name}")
            seen.add(entry.name)
        return v

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self.colors[index]

    def names(self) -> list[str]:
        """Get color names in palette order."""
        return [entry.name for entry in self.colors]

    def get(self, name: str) -> PaletteEntry | None:
        """Find a preset by name (case-insensitive)."""
        name_lower = name.lower()
        for entry in self.colors:
            if entry.name == name_lower:
                return entry
        return None

    def index_of_rgb(self, rgb: RGB) -> int | None:
        """Find the palette slot holding exactly this color."""
        for index, entry in enumerate(self.colors):
            if entry.rgb == rgb:
                return index
        return None


class HighlightOptions(BaseModel):
    """Matching and rendering options, global to one run."""

    case_sensitive: bool = Field(default=False, description="Match terms case-sensitively")
    whole_word: bool = Field(default=False, description="Extend matches to surrounding whitespace")
    background: bool = Field(default=False, description="Color the background instead of the text")


class Config(BaseModel):
    """Top-level run configuration."""

    options: HighlightOptions = Field(default_factory=HighlightOptions)
    palette: Palette
    words: list[str] = Field(
        default_factory=list, description="Highlight rules in 'word' or 'word::color' form"
    )
