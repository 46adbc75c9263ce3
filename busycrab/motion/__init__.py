"""Terminal animations.

Each motion is a self-contained class with ``update()`` (draw one frame)
and ``close()`` (restore the terminal). Motions are looked up by name;
unknown names mean "no animation".
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .clock import ClockMotion
from .crab import CrabMotion
from .mandelbrot import MandelbrotMotion
from .matrix import MatrixMotion

logger = logging.getLogger(__name__)


class Motion(Protocol):
    """A stateful renderer that draws one full frame per ``update()``."""

    def update(self) -> None: ...

    def close(self) -> None: ...


MotionFactory = Callable[[], Motion]

MOTIONS: dict[str, MotionFactory] = {
    "crab": CrabMotion,
    "matrix": MatrixMotion,
    "mandelbrot": MandelbrotMotion,
    "clock": ClockMotion,
}

NONE = "none"


def get_available_motions() -> list[str]:
    """Selectable motion names, including "none"."""
    return [*MOTIONS, NONE]


def get_motion_factory(name: str) -> Optional[MotionFactory]:
    """Factory for the motion called *name* (case-insensitive), or None."""
    key = (name or "").strip().lower()
    factory = MOTIONS.get(key)
    if factory is None and key != NONE:
        logger.debug("Unknown motion %r, animation disabled", name)
    return factory


__all__ = [
    "Motion",
    "MotionFactory",
    "MOTIONS",
    "ClockMotion",
    "CrabMotion",
    "MandelbrotMotion",
    "MatrixMotion",
    "get_available_motions",
    "get_motion_factory",
]
