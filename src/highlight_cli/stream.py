"""Line-by-line stream highlighting."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, BinaryIO

if TYPE_CHECKING:
    from highlight_cli.core.matcher import LineColorizer


class StreamReadError(Exception):
    """Reading from the input stream failed."""


def _read_lines(source: BinaryIO) -> Iterator[bytes]:
    """Yield lines without their line terminator."""
    while True:
        try:
            line = source.readline()
        except OSError as e:
            raise StreamReadError(str(e)) from e
        if not line:
            return
        if line.endswith(b"\n"):
            line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
        yield line


def highlight_stream(source: BinaryIO, sink: BinaryIO, colorizer: LineColorizer) -> int:
    """Colorize a stream one line at a time.

    Every input line produces exactly one output line, terminated by a
    newline and flushed right away so live streams show up immediately.

    Args:
        source: Binary input stream
        sink: Binary output stream
        colorizer: Colorizer applied to each line

    Returns:
        Number of lines written

    Raises:
        StreamReadError: If reading from source fails
    """
    count = 0
    for line in _read_lines(source):
        sink.write(colorizer.colorize(line) + b"\n")
        sink.flush()
        count += 1
    return count
