"""Breathing, slowly rotating zoom through the Mandelbrot set.

Every tick the zoom "breathes" between 0.5x and 2x of the current
waypoint's base zoom. After three breaths the view jumps to the next
waypoint. Iteration counts for the whole screen are computed in one
Numba-compiled pass.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numba import njit

from ..core.colors import BLACK_FG, ansi_fg, cube_color
from ..core.terminal import DEFAULT_HEIGHT, DEFAULT_WIDTH, Terminal

MAX_ITERATIONS = 100

BREATH_STEP = 0.01
ROTATION_STEP = 0.005
COLOR_SHIFT_STEP = 0.2
# Three full breathing periods per waypoint
WAYPOINT_PERIOD = math.pi * 6.0
# Amplitude of the pseudo-random nudge applied to each new waypoint center
JITTER = 0.005

GRADIENT = " .:;+*xX#"
INSIDE = "█"


@dataclass(frozen=True)
class Waypoint:
    """A point of interest to zoom into."""
    name: str
    x: float
    y: float
    zoom: float


WAYPOINTS: tuple[Waypoint, ...] = (
    Waypoint("classic", -0.5, 0.0, 1.0),
    Waypoint("seahorse valley", -0.75, 0.1, 10.0),
    Waypoint("elephant valley", 0.3, 0.0, 50.0),
    Waypoint("mini mandelbrot", -0.1592, 1.0317, 100.0),
    Waypoint("spiral", -0.8, 0.156, 200.0),
    Waypoint("tendrils", 0.0, 0.8, 500.0),
    Waypoint("deep zoom", -0.235125, 0.827215, 1000.0),
    Waypoint("double spiral", -0.7269, 0.1889, 2000.0),
)


def breathing_multiplier(phase: float) -> float:
    """Map sin(phase) from [-1, 1] onto the zoom envelope [0.5, 2.0]."""
    return 0.5 + (math.sin(phase) + 1.0) * 0.75


# =============================================================================
# Numba JIT-compiled escape-time iteration
# =============================================================================

@njit(cache=True)
def escape_iterations(x: float, y: float, max_iterations: int) -> int:
    """Iterate z <- z^2 + c from z = 0 until |z|^2 >= 4 or the bound."""
    zx = 0.0
    zy = 0.0
    iterations = 0
    while iterations < max_iterations and zx * zx + zy * zy < 4.0:
        xtemp = zx * zx - zy * zy + x
        zy = 2.0 * zx * zy + y
        zx = xtemp
        iterations += 1
    return iterations


@njit(cache=True)
def _iterate_grid(
    out: np.ndarray,
    width: int, height: int,
    center_x: float, center_y: float,
    zoom: float, rotation: float,
    max_iterations: int,
) -> None:
    """Fill *out* (height x width) with iteration counts for each cell."""
    scale = 4.0 / (zoom * width)
    aspect = width / height
    cos_a = math.cos(rotation)
    sin_a = math.sin(rotation)

    for row in range(height):
        y = center_y + (row - height / 2.0) * scale * aspect
        for col in range(width):
            x = center_x + (col - width / 2.0) * scale
            rx = x * cos_a - y * sin_a
            ry = x * sin_a + y * cos_a
            out[row, col] = escape_iterations(rx, ry, max_iterations)


class MandelbrotMotion:
    """Full-screen Mandelbrot renderer touring a list of waypoints."""

    def __init__(self, terminal: Optional[Terminal] = None, max_iterations: int = MAX_ITERATIONS):
        self.terminal = terminal or Terminal()
        self.width, self.height = self.terminal.dimensions(2, (DEFAULT_WIDTH, DEFAULT_HEIGHT))
        self.first_update = True
        self.frame_count = 0

        self.waypoints = WAYPOINTS
        self.waypoint_index = 0
        start = self.waypoints[0]

        self.center_x = start.x
        self.center_y = start.y
        self.base_zoom = start.zoom
        self.zoom = start.zoom
        self.max_iterations = max_iterations

        self.rotation_angle = 0.0
        self.color_shift = 0.0
        self.breathing_cycle = 0.0

    @property
    def waypoint(self) -> Waypoint:
        return self.waypoints[self.waypoint_index]

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------

    def update_animation(self) -> None:
        """Advance breathing, rotation and colors; hop waypoints when due."""
        self.breathing_cycle += BREATH_STEP
        self.zoom = self.base_zoom * breathing_multiplier(self.breathing_cycle)

        self.rotation_angle += ROTATION_STEP
        self.color_shift += COLOR_SHIFT_STEP

        if self.breathing_cycle > WAYPOINT_PERIOD:
            self.breathing_cycle = 0.0
            self.waypoint_index = (self.waypoint_index + 1) % len(self.waypoints)
            waypoint = self.waypoint
            self.center_x = waypoint.x + math.sin(self.frame_count * 0.001) * JITTER
            self.center_y = waypoint.y + math.cos(self.frame_count * 0.001) * JITTER
            self.base_zoom = waypoint.zoom

    # ------------------------------------------------------------------
    # Per-pixel mapping
    # ------------------------------------------------------------------

    def iteration_grid(self) -> np.ndarray:
        """Iteration count for every screen cell, shape (height, width)."""
        out = np.zeros((self.height, self.width), dtype=np.int64)
        if self.width > 0 and self.height > 0:
            _iterate_grid(
                out, self.width, self.height,
                self.center_x, self.center_y,
                self.zoom, self.rotation_angle,
                self.max_iterations,
            )
        return out

    def character(self, iterations: int) -> str:
        if iterations >= self.max_iterations:
            return INSIDE
        index = int(iterations / self.max_iterations * len(GRADIENT))
        return GRADIENT[min(index, len(GRADIENT) - 1)]

    def color(self, iterations: int) -> int:
        """256-color code; 0 (black) means inside the set."""
        if iterations >= self.max_iterations:
            return 0
        normalized = (iterations + self.color_shift) / self.max_iterations
        color_index = min(int(normalized * 255.0), 255)
        cycle = (color_index * 0.1 + self.color_shift) % 1.0
        return cube_color(cycle)

    def render(self) -> str:
        grid = self.iteration_grid()
        # Cell style depends only on the iteration count, so build a lookup
        # once per frame.
        styles = []
        for iterations in range(self.max_iterations + 1):
            code = self.color(iterations)
            escape = BLACK_FG if code == 0 else ansi_fg(code)
            styles.append(escape + self.character(iterations))

        lines = []
        for row in grid:
            lines.append("".join(styles[it] for it in row.tolist()) + "\n")
        return "".join(lines)

    def update(self) -> None:
        size = self.terminal.size()
        if size is not None:
            self.width = max(size[0] - 2, 0)
            self.height = max(size[1], 0)

        if self.first_update:
            self.first_update = False
            self.terminal.hide_cursor(clear=True)

        self.update_animation()
        self.terminal.present(self.render())
        self.frame_count += 1

    def close(self) -> None:
        self.terminal.restore()
