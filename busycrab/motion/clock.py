"""Large seven-segment style clock centered in the terminal."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..core.colors import Color
from ..core.terminal import DEFAULT_HEIGHT, DEFAULT_WIDTH, Terminal

# Substitute glyphs each digit cycles through
CYCLING_CHARS: tuple[str, ...] = (
    "0Oo°○◯◉●◆◇◈◊",
    "1Il|│┃║╏╎┊┋┆",
    "2ZzƵƶⱿⱾɀɁɂɃɄ",
    "3EeƐεɛ∃∄∈∉∊∋",
    "4Aa∀∁∂∃∄∅∆∇∈",
    "5Ss∫∬∭∮∯∰∱∲∳",
    "6GgΓγδεζηθικ",
    "7TtτυφχψωϖϗϘ",
    "8Bb∞∝∟∠∡∢∣∤∥",
    "9PpπϖϗϘϙϚϛϜϝ",
)

# Frames each substitute stays on screen
CYCLE_FRAMES = 3

GLYPH_ROWS = 5
GLYPH_WIDTH = 7

# "{}" marks the cycling cell
DIGIT_GLYPHS: tuple[tuple[str, ...], ...] = (
    (" _____ ", "|     |", "|  {}  |", "|     |", "|_____|"),
    ("   |   ", "   |   ", "   {}   ", "   |   ", "   |   "),
    (" _____ ", "      |", " _____|", "|      ", "|_____ "),
    (" _____ ", "      |", " _____|", "      |", " _____|"),
    ("|     |", "|     |", "|_____|", "      |", "      |"),
    (" _____ ", "|      ", "|_____ ", "      |", " _____|"),
    (" _____ ", "|      ", "|_____ ", "|     |", "|_____|"),
    (" _____ ", "      |", "      |", "      |", "      |"),
    (" _____ ", "|     |", "|_____|", "|     |", "|_____|"),
    (" _____ ", "|     |", "|_____|", "      |", " _____|"),
)

COLON = ("       ", "   |   ", "       ", "   |   ", "       ")
BLANK = (" " * GLYPH_WIDTH,) * GLYPH_ROWS

COLOR = Color.CLOCK_WHITE


def split_digits(hours: int, minutes: int, seconds: int) -> list[tuple[int, int]]:
    """Split each two-digit field into (tens, ones)."""
    return [divmod(value, 10) for value in (hours, minutes, seconds)]


class ClockMotion:
    """HH:MM:SS in block digits, redrawn every tick from the wall clock."""

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.terminal = terminal or Terminal()
        self.now = now
        self.width, self.height = self.terminal.dimensions(2, (DEFAULT_WIDTH, DEFAULT_HEIGHT))
        self.first_update = True
        self.frame_count = 0
        self.last_second: Optional[int] = None
        self.cycling_chars = CYCLING_CHARS

    def current_time(self) -> tuple[int, int, int]:
        now = self.now()
        return now.hour, now.minute, now.second

    def cycling_char(self, digit: int, frame: int) -> str:
        chars = self.cycling_chars[digit]
        return chars[(frame // CYCLE_FRAMES) % len(chars)]

    def draw_digit(self, digit: int, frame: int) -> tuple[str, ...]:
        if not 0 <= digit <= 9:
            return BLANK
        char = self.cycling_char(digit, frame)
        return tuple(line.replace("{}", char) for line in DIGIT_GLYPHS[digit])

    def clock_lines(self, hours: int, minutes: int, seconds: int) -> list[str]:
        """The five text rows of HH:MM:SS."""
        blocks = []
        for i, (tens, ones) in enumerate(split_digits(hours, minutes, seconds)):
            if i:
                blocks.append(COLON)
            blocks.append(self.draw_digit(tens, self.frame_count))
            blocks.append(self.draw_digit(ones, self.frame_count))
        return ["".join(block[row] for block in blocks) for row in range(GLYPH_ROWS)]

    def center(self, lines: list[str]) -> list[str]:
        """Pad *lines* so the block sits in the middle of the screen."""
        max_width = max((len(line) for line in lines), default=0)
        start_col = max(self.width - max_width, 0) // 2
        start_row = max(self.height - len(lines), 0) // 2

        blank = " " * self.width
        centered = [blank] * start_row
        centered.extend(" " * start_col + line for line in lines)
        centered.extend([blank] * (self.height - len(centered)))
        return centered

    def render(self) -> str:
        hours, minutes, seconds = self.current_time()
        if seconds != self.last_second:
            self.last_second = seconds

        color = COLOR.ansi_fg()
        reset = Color.RESET.ansi_fg()
        lines = self.center(self.clock_lines(hours, minutes, seconds))
        return "".join(f"{color}{line}{reset}\n" for line in lines)

    def update(self) -> None:
        size = self.terminal.size()
        if size is not None:
            self.width = max(size[0] - 2, 0)
            self.height = max(size[1], 0)

        if self.first_update:
            self.first_update = False
            self.terminal.hide_cursor(clear=True)

        self.terminal.present(self.render())
        self.frame_count += 1

    def close(self) -> None:
        self.terminal.restore()
