"""macOS sleep prevention.

``caffeinate -d -i`` holds the PreventUserIdleDisplaySleep and
PreventUserIdleSystemSleep assertions. ``-w <pid>`` ties its lifetime to
ours so a crash never leaves the assertions behind. Run
``pmset -g assertions`` to inspect them.
"""

from __future__ import annotations

import os
from typing import Optional

from .inhibitor import InhibitorProcess


class MacPlatform:

    def __init__(self, pid: Optional[int] = None):
        pid = pid if pid is not None else os.getpid()
        self.inhibitor = InhibitorProcess(["caffeinate", "-d", "-i", "-w", str(pid)])

    def prevent_sleep(self) -> None:
        self.inhibitor.ensure_running()

    def release(self) -> None:
        self.inhibitor.stop()
