"""Command-line interface for highlight-cli."""

from __future__ import annotations

import argparse
import os
import sys

from highlight_cli import __version__
from highlight_cli.config.loader import build_config
from highlight_cli.config.schema import Config
from highlight_cli.core.matcher import LineColorizer
from highlight_cli.core.words import build_word_table, parse_word_specs
from highlight_cli.stream import StreamReadError, highlight_stream

EXAMPLE = "tail -f app.log | ch error::red warning::orange success::green"


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="ch",
        description="Highlight words in a text stream with ANSI colors",
        epilog=f"Example: {EXAMPLE}",
    )

    parser.add_argument(
        "--case-sensitive",
        "-s",
        action="store_true",
        help="Case-sensitive matching (default: case-insensitive)",
    )

    parser.add_argument(
        "--whole-word",
        "-w",
        action="store_true",
        help="Extend matches to the whole surrounding word",
    )

    parser.add_argument(
        "--background",
        "-b",
        action="store_true",
        help="Color the background instead of the text",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "words",
        nargs="*",
        metavar="WORD[::COLOR]",
        help="Word to highlight, optionally with a color name or 6-digit hex value",
    )

    return parser.parse_args(args)


def print_usage(config: Config) -> None:
    """Print the usage banner to stderr."""
    lines = [
        "Usage: ch [options] <word1> <word2>::<COLOR> ...",
        "Options:",
        "  -s    case-sensitive matching (default: case-insensitive)",
        "  -w    extend match to whole word",
        "  -b    color the background instead of the text",
        "",
        "Colors:",
        f"  Named: {', '.join(config.palette.names())}",
        "  Hex: any 6-digit hex color (e.g., FF5500)",
        "",
        "Example:",
        f"  {EXAMPLE}",
    ]
    print("\n".join(lines), file=sys.stderr)


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    config = build_config(
        parsed.words,
        case_sensitive=parsed.case_sensitive,
        whole_word=parsed.whole_word,
        background=parsed.background,
    )

    if not config.words:
        print_usage(config)
        return 1

    options = config.options
    table = build_word_table(
        parse_word_specs(config.words),
        case_sensitive=options.case_sensitive,
        background=options.background,
        palette=config.palette,
    )
    colorizer = LineColorizer(
        table,
        whole_word=options.whole_word,
        case_sensitive=options.case_sensitive,
    )

    try:
        highlight_stream(sys.stdin.buffer, sys.stdout.buffer, colorizer)
        return 0

    except StreamReadError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        # Reader closed the pipe; stdout must not be flushed again at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return 0


if __name__ == "__main__":
    sys.exit(main())
