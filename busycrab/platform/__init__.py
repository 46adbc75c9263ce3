"""Platform-specific sleep prevention.

The backend is picked from ``sys.platform``:

- Windows: ``SetThreadExecutionState`` through ctypes
- macOS: a ``caffeinate`` child process holding power assertions
- Linux and others: a ``systemd-inhibit`` child process when available

Every backend exposes ``prevent_sleep()`` (raises SleepPreventionError on
failure) and ``release()``.
"""

from __future__ import annotations

import sys
from typing import Protocol

from ..errors import SleepPreventionError


class SleepPreventer(Protocol):
    """Keeps the system and display awake."""

    def prevent_sleep(self) -> None: ...

    def release(self) -> None: ...


def get_platform(platform: str = sys.platform) -> SleepPreventer:
    """Sleep-prevention backend for *platform*."""
    if platform.startswith("win"):
        from .windows import WindowsPlatform
        return WindowsPlatform()
    if platform == "darwin":
        from .macos import MacPlatform
        return MacPlatform()
    from .linux import LinuxPlatform
    return LinuxPlatform()


__all__ = ["SleepPreventer", "SleepPreventionError", "get_platform"]
