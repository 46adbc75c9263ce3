"""Core utilities - terminal output, colors, run flags and the animation thread."""

from .animation import AnimationScheduler
from .colors import Color
from .flags import KeepRunning, RunFlag
from .terminal import Terminal, query_terminal_size

__all__ = [
    "AnimationScheduler",
    "Color",
    "KeepRunning",
    "RunFlag",
    "Terminal",
    "query_terminal_size",
]
