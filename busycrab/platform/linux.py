"""Linux sleep prevention through systemd-inhibit.

Systems without systemd get an error on the first activity cycle.
"""

from __future__ import annotations

import shutil
from typing import Callable, Optional

from ..errors import SleepPreventionError
from .inhibitor import InhibitorProcess

INHIBIT_COMMAND = [
    "systemd-inhibit",
    "--what=idle:sleep",
    "--who=busycrab",
    "--why=Keeping the workstation active",
    "--mode=block",
    "sleep", "infinity",
]


class LinuxPlatform:

    def __init__(self, which: Callable[[str], Optional[str]] = shutil.which):
        self.inhibitor: Optional[InhibitorProcess] = None
        if which("systemd-inhibit"):
            self.inhibitor = InhibitorProcess(INHIBIT_COMMAND)

    def prevent_sleep(self) -> None:
        if self.inhibitor is None:
            raise SleepPreventionError(
                "Sleep prevention not implemented for this OS (systemd-inhibit not found)"
            )
        self.inhibitor.ensure_running()

    def release(self) -> None:
        if self.inhibitor is not None:
            self.inhibitor.stop()
