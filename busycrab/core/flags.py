"""Shared run flags between the activity loop and the animation thread.

Each flag starts set, is cleared exactly once, and is never reset.
"""

from __future__ import annotations

import threading


class KeepRunning:
    """Main-loop flag cleared by the Ctrl+C handler.

    The handler runs on the main thread between bytecodes, so it must not
    take a lock the interrupted code may already hold. A single attribute
    store is atomic under the interpreter lock.
    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = True

    def stop(self) -> None:
        self._value = False

    def is_set(self) -> bool:
        return self._value

    def __bool__(self) -> bool:
        return self._value


class RunFlag:
    """Lock-protected animation flag, read every tick by the animation thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = True

    def clear(self) -> None:
        with self._lock:
            self._value = False

    def is_set(self) -> bool:
        with self._lock:
            return self._value

    def __bool__(self) -> bool:
        return self.is_set()
