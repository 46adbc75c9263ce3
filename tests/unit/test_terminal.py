"""Tests for terminal output and colors."""

import io

import pytest

from busycrab.core.colors import Color, ansi_fg, cube_color
from busycrab.core.terminal import (
    CLEAR_HOME,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    HIDE_CURSOR,
    SHOW_CURSOR,
    Terminal,
    query_terminal_size,
)


class TestColor:
    """Tests for Color enum and escape helpers."""

    def test_ansi_fg_code(self):
        assert Color.BRIGHT_WHITE.ansi_fg() == "\033[38;5;15m"
        assert Color.MATRIX_DIM.ansi_fg() == "\033[38;5;22m"

    def test_reset_code(self):
        assert Color.RESET.ansi_fg() == "\033[0m"

    def test_arbitrary_code(self):
        assert ansi_fg(196) == "\033[38;5;196m"

    def test_cube_color_range(self):
        """Cube positions map into 16-231."""
        assert cube_color(0.0) == 16
        assert cube_color(0.999) == 230
        assert cube_color(1.0) == 231
        assert cube_color(5.0) == 231
        assert cube_color(-1.0) == 16


class TestQueryTerminalSize:
    def test_stringio_has_no_size(self):
        """A stream without a real fd reports no size."""
        assert query_terminal_size(io.StringIO()) is None


class TestTerminal:
    """Tests for Terminal writer."""

    def test_dimensions_with_margin(self):
        term = Terminal(io.StringIO(), size_query=lambda: (100, 40))
        assert term.dimensions(2) == (98, 40)
        assert term.dimensions(5) == (95, 40)

    def test_dimensions_fallback_when_unavailable(self):
        term = Terminal(io.StringIO(), size_query=lambda: None)
        assert term.dimensions() == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        assert term.dimensions(5, (75, 1)) == (75, 1)

    def test_dimensions_never_negative(self):
        term = Terminal(io.StringIO(), size_query=lambda: (1, 0))
        assert term.dimensions(5) == (0, 0)

    def test_size_query_oserror_is_unavailable(self):
        def broken():
            raise OSError("no tty")

        term = Terminal(io.StringIO(), size_query=broken)
        assert term.size() is None

    def test_hide_and_restore(self):
        stream = io.StringIO()
        term = Terminal(stream, size_query=lambda: None)
        term.hide_cursor(clear=True)
        term.restore()
        out = stream.getvalue()
        assert out.startswith(HIDE_CURSOR + CLEAR_HOME)
        assert out.endswith(SHOW_CURSOR + "\033[0m")

    def test_restore_without_color_reset(self):
        stream = io.StringIO()
        term = Terminal(stream, size_query=lambda: None)
        term.restore(reset_color=False)
        assert stream.getvalue() == SHOW_CURSOR

    def test_present_clears_and_resets(self):
        stream = io.StringIO()
        term = Terminal(stream, size_query=lambda: None)
        term.present("frame")
        assert stream.getvalue() == CLEAR_HOME + "frame" + "\033[0m"

    def test_write_to_closed_stream_is_ignored(self):
        """Output is best effort and never raises."""
        stream = io.StringIO()
        stream.close()
        term = Terminal(stream, size_query=lambda: None)
        term.write("x")
        term.flush()
        term.restore()
