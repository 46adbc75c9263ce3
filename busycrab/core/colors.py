"""Centralized color definitions for BusyCrab animations.

All motions draw with ANSI 256-color foreground codes. The named entries
below are the fixed colors; the Mandelbrot palette is computed from the
216-color cube (codes 16-231).
"""

from enum import Enum

RESET = "\033[0m"
BLACK_FG = "\033[30m"

# 6x6x6 color cube in the 256-color palette
CUBE_START = 16
CUBE_SIZE = 216


class Color(Enum):
    """ANSI 256-color codes used by the motions. Value is the color number."""
    RESET = -1

    BRIGHT_WHITE = 15
    MATRIX_DIM = 22
    CLOCK_WHITE = 255

    def ansi_fg(self) -> str:
        """Get ANSI foreground escape code."""
        if self == Color.RESET:
            return RESET
        return ansi_fg(self.value)


def ansi_fg(code: int) -> str:
    """Foreground escape for an arbitrary 256-color code."""
    return f"\033[38;5;{code}m"


def cube_color(position: float) -> int:
    """Map a position in [0, 1) onto the 216-color cube."""
    index = int(position * (CUBE_SIZE - 1))
    return CUBE_START + min(max(index, 0), CUBE_SIZE - 1)
