"""Falling-symbol "digital rain" across the full terminal.

Each column has one drop whose head moves down a row per tick. Cells are
classified by their distance to the column's head:

  head   row == floor(drop)          bright white, always a fresh symbol
  tail   drop - 8 < row < drop       green fading with distance, flickers
  other  everything else             dim green, mostly blank
"""

from __future__ import annotations

import string
from typing import Optional

import numpy as np

from ..core.colors import Color, ansi_fg
from ..core.terminal import Terminal

SYMBOLS = tuple(
    string.digits
    + string.ascii_uppercase
    + string.ascii_lowercase
    + "GUINETIK"
    + "!@#$%^&*()-_=+[]{}|\\:;\"'<>,.?/~`"
)

RESET_PROBABILITY = 0.025
TAIL_FLICKER_PROBABILITY = 0.1
NOISE_PROBABILITY = 0.05
TAIL_LENGTH = 8
# Rows a drop may fall past the bottom before it is recycled
OVERSHOOT = 10

HEAD_COLOR = Color.BRIGHT_WHITE.value
DIM_COLOR = Color.MATRIX_DIM.value


def tail_color(distance: np.ndarray) -> np.ndarray:
    """Green intensity (22-28) for tail cells *distance* rows above the head."""
    opacity = np.maximum(0.9 - distance * 0.1, 0.1)
    return (opacity * 7).astype(np.int64) + DIM_COLOR


class MatrixMotion:
    """Matrix-style rain over a rows x columns character grid."""

    def __init__(self, terminal: Optional[Terminal] = None, seed: Optional[int] = None):
        self.terminal = terminal or Terminal()
        self.rng = np.random.default_rng(seed)
        self.symbols = np.array(SYMBOLS)

        self.columns, self.rows = self.terminal.dimensions()
        self.drops = -self.rng.integers(0, max(self.rows, 1), size=self.columns).astype(np.float64)
        self.grid = np.full((self.rows, self.columns), " ", dtype="<U1")

        self.first_update = True
        self.frame_count = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def resize(self, columns: int, rows: int) -> None:
        """Resize drop and grid buffers, keeping values that still fit."""
        if columns != len(self.drops):
            drops = np.full(columns, -1.0)
            keep = min(columns, len(self.drops))
            drops[:keep] = self.drops[:keep]
            self.drops = drops

        if self.grid.shape != (rows, columns):
            grid = np.full((rows, columns), " ", dtype="<U1")
            keep_rows = min(rows, self.grid.shape[0])
            keep_cols = min(columns, self.grid.shape[1])
            grid[:keep_rows, :keep_cols] = self.grid[:keep_rows, :keep_cols]
            self.grid = grid

        self.columns = columns
        self.rows = rows

    def _random_symbols(self, shape: tuple[int, int]) -> np.ndarray:
        return self.symbols[self.rng.integers(0, len(self.symbols), size=shape)]

    def update_drops(self) -> None:
        """Move every drop down one row, recycling spent or unlucky ones."""
        n = len(self.drops)
        spent = self.drops > self.rows + OVERSHOOT
        unlucky = self.rng.random(n) < RESET_PROBABILITY
        restart = -self.rng.integers(0, max(self.rows, 1), size=n).astype(np.float64)
        self.drops = np.where(spent | unlucky, restart, self.drops + 1.0)

    def zones(self) -> tuple[np.ndarray, np.ndarray]:
        """Boolean (head, tail) masks of shape (rows, columns)."""
        row = np.arange(self.rows, dtype=np.float64)[:, None]
        drops = self.drops[None, :]
        head = row == np.floor(drops)
        tail = ~head & (row < drops) & (row > drops - TAIL_LENGTH)
        return head, tail

    def update_grid(self) -> None:
        """Refresh cell symbols according to their zone."""
        shape = (self.rows, self.columns)
        head, tail = self.zones()
        fresh = self._random_symbols(shape)
        roll = self.rng.random(shape)

        grid = self.grid
        grid[head] = fresh[head]

        flicker = tail & (roll < TAIL_FLICKER_PROBABILITY)
        grid[flicker] = fresh[flicker]

        other = ~(head | tail)
        grid[other] = np.where(roll < NOISE_PROBABILITY, fresh, " ")[other]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def cell_colors(self) -> np.ndarray:
        """ANSI color code for every cell."""
        head, tail = self.zones()
        distance = self.drops[None, :] - np.arange(self.rows, dtype=np.float64)[:, None]
        colors = np.full((self.rows, self.columns), DIM_COLOR, dtype=np.int64)
        colors = np.where(tail, tail_color(distance), colors)
        return np.where(head, HEAD_COLOR, colors)

    def render(self) -> str:
        colors = self.cell_colors()
        lines = []
        for row in range(self.rows):
            parts = []
            for col in range(self.columns):
                parts.append(ansi_fg(int(colors[row, col])))
                parts.append(self.grid[row, col])
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    def update(self) -> None:
        size = self.terminal.size()
        if size is not None:
            self.resize(max(size[0] - 2, 0), max(size[1], 0))

        if self.first_update:
            self.first_update = False
            self.terminal.hide_cursor(clear=True)

        self.update_drops()
        self.update_grid()
        self.terminal.present(self.render())
        self.frame_count += 1

    def close(self) -> None:
        self.terminal.restore()
