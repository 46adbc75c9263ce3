"""Terminal frame output shared by every motion.

A Terminal wraps an output stream and a size query. Motions use it to
hide the cursor on their first frame, clear and redraw each tick, and
restore the cursor and colors when they are closed.

Escape sequence reference:
  Hide cursor:   ESC[?25l
  Show cursor:   ESC[?25h
  Clear + home:  ESC[2J ESC[H
  Erase line:    ESC[K
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, Optional, TextIO

from .colors import RESET

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_HOME = "\033[2J\033[H"
ERASE_LINE = "\033[K"

# Used when the terminal size cannot be determined (non-TTY output)
DEFAULT_WIDTH = 78
DEFAULT_HEIGHT = 20

SizeQuery = Callable[[], Optional[tuple[int, int]]]


def query_terminal_size(stream: Optional[TextIO] = None) -> Optional[tuple[int, int]]:
    """Return (columns, lines) of the terminal behind *stream*, or None.

    None means the size is unavailable, e.g. output is piped to a file.
    """
    stream = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return None
    return size.columns, size.lines


class Terminal:
    """Best-effort ANSI terminal writer.

    Write failures are ignored: a frame that cannot be written is simply
    lost, and the next tick tries again.
    """

    def __init__(self, stream: Optional[TextIO] = None, size_query: Optional[SizeQuery] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._size_query = size_query or (lambda: query_terminal_size(self.stream))
        self._cursor_hidden = False

    def size(self) -> Optional[tuple[int, int]]:
        """Current (width, height), or None when unavailable."""
        try:
            return self._size_query()
        except OSError:
            return None

    def dimensions(
        self,
        margin: int = 2,
        default: tuple[int, int] = (DEFAULT_WIDTH, DEFAULT_HEIGHT),
    ) -> tuple[int, int]:
        """Usable (width, height) with *margin* columns reserved.

        Falls back to *default* when the size is unavailable. Never
        returns negative values.
        """
        size = self.size()
        if size is None:
            return default
        width, height = size
        return max(width - margin, 0), max(height, 0)

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except (OSError, ValueError):
            pass

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError):
            pass

    def hide_cursor(self, clear: bool = False) -> None:
        """Hide the cursor, optionally clearing the screen too."""
        self._cursor_hidden = True
        self.write(HIDE_CURSOR + (CLEAR_HOME if clear else ""))

    def present(self, frame: str) -> None:
        """Clear the screen, draw *frame*, reset color and flush."""
        self.write(CLEAR_HOME + frame + RESET)
        self.flush()

    def restore(self, reset_color: bool = True) -> None:
        """Show the cursor (and reset colors) and flush."""
        self.write(SHOW_CURSOR + (RESET if reset_color else ""))
        self.flush()
        if self._cursor_hidden:
            logger.debug("Terminal cursor restored")
        self._cursor_hidden = False
