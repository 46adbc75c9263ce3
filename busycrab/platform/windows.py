"""Windows sleep prevention via SetThreadExecutionState."""

from __future__ import annotations

import ctypes
import logging

from ..errors import SleepPreventionError

logger = logging.getLogger(__name__)

ES_CONTINUOUS = 0x80000000
ES_SYSTEM_REQUIRED = 0x00000001
ES_DISPLAY_REQUIRED = 0x00000002


class WindowsPlatform:
    """Keeps the system and display on until the next call or release."""

    def __init__(self, kernel32=None):
        self._kernel32 = kernel32

    @property
    def kernel32(self):
        if self._kernel32 is None:
            self._kernel32 = ctypes.windll.kernel32
        return self._kernel32

    def prevent_sleep(self) -> None:
        result = self.kernel32.SetThreadExecutionState(
            ES_CONTINUOUS | ES_SYSTEM_REQUIRED | ES_DISPLAY_REQUIRED
        )
        if result == 0:
            raise SleepPreventionError("Failed to set execution state")

    def release(self) -> None:
        """Clear the execution state flags set by ``prevent_sleep``."""
        if self._kernel32 is None:
            return
        self._kernel32.SetThreadExecutionState(ES_CONTINUOUS)
        logger.debug("Execution state cleared")
