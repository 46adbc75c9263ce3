"""Mouse control used to simulate user activity."""

from __future__ import annotations

from typing import Protocol


class MouseController(Protocol):
    """Moves the pointer relative to its current position."""

    def move_relative(self, dx: int, dy: int) -> None: ...


class PyAutoGUIMouse:
    """MouseController backed by pyautogui.

    pyautogui connects to the display server on import, so it is loaded
    when the controller is created rather than when this module is.
    """

    def __init__(self):
        import pyautogui

        self._pyautogui = pyautogui

    def move_relative(self, dx: int, dy: int) -> None:
        self._pyautogui.moveRel(dx, dy)
