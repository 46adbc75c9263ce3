"""A crab walking back and forth along a single terminal line."""

from __future__ import annotations

from typing import Optional

from ..core.terminal import ERASE_LINE, Terminal

CRAB = "\U0001F980"

# Columns reserved on the right so the glyph never wraps
MARGIN = 5
DEFAULT_WIDTH = 75


class CrabMotion:
    """Single-line bouncing glyph."""

    def __init__(self, terminal: Optional[Terminal] = None):
        self.terminal = terminal or Terminal()
        self.width, _ = self.terminal.dimensions(MARGIN, (DEFAULT_WIDTH, 1))
        self.position = 0
        self.direction = 1
        self.first_update = True
        self.frame_count = 0

    def step(self) -> None:
        """Advance one column, reversing at either edge."""
        new_position = self.position + self.direction
        if new_position <= 0:
            self.position = 0
            self.direction = 1
        elif new_position >= self.width:
            self.position = self.width
            self.direction = -1
        else:
            self.position = new_position

    def update(self) -> None:
        size = self.terminal.size()
        if size is not None:
            self.width = max(size[0] - MARGIN, 0)

        self.step()

        if self.first_update:
            self.first_update = False
            self.terminal.hide_cursor()

        self.terminal.write(f"\r{ERASE_LINE}{' ' * self.position}{CRAB}")
        self.terminal.flush()
        self.frame_count += 1

    def close(self) -> None:
        self.terminal.restore(reset_color=False)
