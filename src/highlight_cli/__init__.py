"""Streaming text highlighter for terminals."""

__version__ = "0.1.0"
