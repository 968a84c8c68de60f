"""Pytest configuration and fixtures."""

import pytest

from highlight_cli.config.loader import get_default_palette, load_palette
from highlight_cli.config.schema import Palette
from highlight_cli.core.color import RESET

RED = b"\x1b[38;2;255;105;97m"
GREEN = b"\x1b[38;2;134;194;29m"
ORANGE = b"\x1b[38;2;240;160;75m"
BLUE = b"\x1b[38;2;134;176;189m"


@pytest.fixture
def palette() -> Palette:
    """Built-in preset palette."""
    return get_default_palette()


@pytest.fixture
def small_palette() -> Palette:
    """Two-color palette for exhaustion tests."""
    yaml_content = """
palette:
  - name: black
    rgb: "000000"
  - name: white
    rgb: "#FFFFFF"
"""
    return load_palette(yaml_content)


@pytest.fixture
def reset() -> bytes:
    """Reset sequence closing every colored span."""
    return RESET
