"""Tests for the cli module."""

import io
import sys

import pytest
from conftest import GREEN, ORANGE, RED

from highlight_cli.cli import main, parse_args


def run(monkeypatch, args, data: bytes) -> tuple[int, bytes]:
    """Run the CLI with the given stdin bytes and return (exit code, stdout bytes)."""
    stdin = io.TextIOWrapper(io.BytesIO(data))
    stdout = io.TextIOWrapper(io.BytesIO())
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    code = main(args)
    return code, stdout.buffer.getvalue()


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self):
        """Test default option values."""
        parsed = parse_args(["error"])

        assert parsed.words == ["error"]
        assert not parsed.case_sensitive
        assert not parsed.whole_word
        assert not parsed.background

    def test_short_flags(self):
        """Test short option names."""
        parsed = parse_args(["-s", "-w", "-b", "a::red", "b"])

        assert parsed.case_sensitive
        assert parsed.whole_word
        assert parsed.background
        assert parsed.words == ["a::red", "b"]

    def test_long_flags(self):
        """Test long option names."""
        parsed = parse_args(["--case-sensitive", "--whole-word", "--background", "x"])

        assert parsed.case_sensitive
        assert parsed.whole_word
        assert parsed.background

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--version"])

        assert excinfo.value.code == 0
        assert "ch 0.1.0" in capsys.readouterr().out


class TestMain:
    """Tests for main function."""

    def test_no_words_usage(self, capsys):
        """Test that running without words prints usage and fails."""
        code = main([])

        assert code == 1
        err = capsys.readouterr().err
        assert "Usage: ch [options]" in err
        assert "red, green, orange, blue, pink, purple" in err

    def test_highlights_stdin(self, monkeypatch, reset):
        """Test highlighting piped input."""
        code, out = run(monkeypatch, ["error::red", "warn"], b"an error\nwarn\nplain\n")

        assert code == 0
        assert out == (
            b"an " + RED + b"error" + reset + b"\n" + GREEN + b"warn" + reset + b"\nplain\n"
        )

    def test_case_sensitive_flag(self, monkeypatch, reset):
        """Test that -s restricts matches to the exact case."""
        code, out = run(monkeypatch, ["-s", "Error"], b"Error error\n")

        assert code == 0
        assert out == RED + b"Error" + reset + b" error\n"

    def test_whole_word_flag(self, monkeypatch, reset):
        """Test that -w extends matches."""
        code, out = run(monkeypatch, ["-w", "back"], b"backup_13344.zip started\n")

        assert code == 0
        assert out == RED + b"backup_13344.zip" + reset + b" started\n"

    def test_background_flag(self, monkeypatch, reset):
        """Test that -b renders background colors."""
        code, out = run(monkeypatch, ["-b", "x"], b"x\n")

        assert code == 0
        assert out == b"\x1b[48;2;255;105;97mx" + reset + b"\n"

    def test_invalid_color_warns(self, monkeypatch, capsys, reset):
        """Test that an invalid color warns and still highlights."""
        code, out = run(monkeypatch, ["a::red", "b::nope"], b"b\n")

        assert code == 0
        assert out == GREEN + b"b" + reset + b"\n"
        assert "Warning: invalid color 'nope' for word 'b', using preset" in capsys.readouterr().err

    def test_explicit_colors_reserved(self, monkeypatch, reset):
        """Test that auto colors skip explicitly requested presets."""
        code, out = run(monkeypatch, ["a", "b::red", "c::green"], b"a\n")

        assert code == 0
        assert out == ORANGE + b"a" + reset + b"\n"

    def test_read_error(self, monkeypatch, capsys):
        """Test that input failures exit with an error."""

        class BrokenStdin:
            class buffer:
                @staticmethod
                def readline():
                    raise OSError("Input/output error")

        monkeypatch.setattr(sys, "stdin", BrokenStdin())
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO()))

        code = main(["x"])

        assert code == 1
        assert "Error reading input: Input/output error" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch):
        """Test that Ctrl-C while reading exits with 130."""

        class InterruptedStdin:
            class buffer:
                @staticmethod
                def readline():
                    raise KeyboardInterrupt

        monkeypatch.setattr(sys, "stdin", InterruptedStdin())
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO()))

        assert main(["x"]) == 130

    def test_closed_pipe(self, monkeypatch, tmp_path, capsys):
        """Test that a reader closing the pipe ends the run quietly."""

        class ClosedPipeStdout:
            def __init__(self, handle):
                self.handle = handle
                self.buffer = self

            def write(self, data):
                raise BrokenPipeError(32, "Broken pipe")

            def flush(self):
                pass

            def fileno(self):
                return self.handle.fileno()

        target = tmp_path / "out"
        with open(target, "wb") as handle:
            monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"x\n")))
            monkeypatch.setattr(sys, "stdout", ClosedPipeStdout(handle))

            code = main(["x"])

            # The descriptor now points at the null device
            handle.write(b"dropped")

        assert code == 0
        assert target.read_bytes() == b""
        assert capsys.readouterr().err == ""
