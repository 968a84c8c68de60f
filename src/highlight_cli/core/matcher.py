"""Per-line term matching and colorizing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from highlight_cli.core.words import ResolvedWord

# Bytes that end a word in whole-word mode
WORD_BOUNDARIES = frozenset(b" \n\t")


def fold_case(data: bytes) -> bytes:
    """Lower-case text without changing its byte length.

    Characters whose lower-case form encodes to a different number of
    bytes (e.g. U+212A KELVIN SIGN) are kept as they are, as are bytes that
    are not valid UTF-8, so offsets into the result match the input.

    Examples:
        >>> fold_case("ÉRROR".encode())
        b'\\xc3\\xa9rror'
    """
    if data.isascii():
        return data.lower()

    text = data.decode("utf-8", "surrogateescape")
    folded: list[str] = []
    for char in text:
        lowered = char.lower()
        if len(lowered.encode("utf-8", "surrogateescape")) != len(
            char.encode("utf-8", "surrogateescape")
        ):
            lowered = char
        folded.append(lowered)
    return "".join(folded).encode("utf-8", "surrogateescape")


@dataclass
class Match:
    """An accepted match within one line."""

    start: int
    end: int  # Exclusive
    rendered: bytes


class LineColorizer:
    """Finds term occurrences in lines and wraps them in color codes.

    Words are tried in table order and each byte of a line can belong to at
    most one match: an occurrence overlapping an earlier accepted match is
    dropped, whatever its length or position.
    """

    def __init__(
        self,
        words: Sequence[ResolvedWord],
        whole_word: bool = False,
        case_sensitive: bool = False,
    ) -> None:
        """Initialize colorizer.

        Args:
            words: Resolved word table, highest priority first
            whole_word: Extend each match out to the surrounding whitespace
            case_sensitive: Match against the line as-is instead of lower-cased
        """
        self.words = tuple(words)
        self.whole_word = whole_word
        self.case_sensitive = case_sensitive

    def _extend(self, line: bytes, start: int, end: int) -> tuple[int, int]:
        """Grow a span to the nearest word boundaries on both sides."""
        while start > 0 and line[start - 1] not in WORD_BOUNDARIES:
            start -= 1
        length = len(line)
        while end < length and line[end] not in WORD_BOUNDARIES:
            end += 1
        return start, end

    def find_matches(self, line: bytes) -> list[Match]:
        """Find all accepted matches in a line.

        Args:
            line: Raw line without its newline

        Returns:
            Non-overlapping matches sorted by start offset
        """
        search_line = line if self.case_sensitive else fold_case(line)
        claimed = bytearray(len(line))
        matches: list[Match] = []

        for word in self.words:
            key = word.search_key
            pos = search_line.find(key)
            while pos != -1:
                start, end = pos, pos + len(key)
                if self.whole_word:
                    start, end = self._extend(line, start, end)

                if not any(claimed[start:end]):
                    claimed[start:end] = b"\x01" * (end - start)
                    matches.append(Match(start, end, word.color.wrap(line[start:end])))

                # Step one byte so a term can overlap its own earlier occurrence
                pos = search_line.find(key, pos + 1)

        return sorted(matches, key=attrgetter("start"))

    def colorize(self, line: bytes) -> bytes:
        """Colorize every accepted match in a line.

        Args:
            line: Raw line without its newline

        Returns:
            The colorized line, or the line itself when nothing matched
        """
        matches = self.find_matches(line)
        if not matches:
            return line

        parts: list[bytes] = []
        last = 0
        for match in matches:
            parts.append(line[last : match.start])
            parts.append(match.rendered)
            last = match.end
        parts.append(line[last:])
        return b"".join(parts)


def colorize(
    line: bytes,
    words: Sequence[ResolvedWord],
    whole_word: bool = False,
    case_sensitive: bool = False,
) -> bytes:
    """Colorize a single line.

    Args:
        line: Raw line without its newline
        words: Resolved word table, highest priority first
        whole_word: Extend each match out to the surrounding whitespace
        case_sensitive: Match against the line as-is instead of lower-cased

    Returns:
        The colorized line

    Examples:
        >>> from highlight_cli.core.words import build_word_table, WordSpec
        >>> table = build_word_table([WordSpec(b"world", "red")])
        >>> colorize(b"hello world", table)
        b'hello \\x1b[38;2;255;105;97mworld\\x1b[0m'
    """
    return LineColorizer(words, whole_word=whole_word, case_sensitive=case_sensitive).colorize(line)
