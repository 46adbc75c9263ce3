"""Long-lived helper process that holds a sleep inhibition while it runs."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from ..errors import SleepPreventionError

logger = logging.getLogger(__name__)


class InhibitorProcess:
    """Starts *command* on first use and checks it is still alive after.

    The inhibition lasts exactly as long as the child process, so
    ``ensure_running`` is safe to call every activity cycle.
    """

    def __init__(self, command: list[str]):
        self.command = command
        self._process: Optional[subprocess.Popen] = None

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process is not None else None

    def ensure_running(self) -> None:
        if self._process is None:
            try:
                self._process = subprocess.Popen(
                    self.command,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
            except OSError as e:
                raise SleepPreventionError(f"Cannot start {self.command[0]}: {e}") from e
            logger.info("Started %s (pid %d)", self.command[0], self._process.pid)
            return

        code = self._process.poll()
        if code is not None:
            raise SleepPreventionError(f"{self.command[0]} exited unexpectedly (code {code})")

    def stop(self) -> None:
        if self._process is None:
            return
        if self._process.poll() is None:
            self._process.terminate()
            try:
                self._process.wait(timeout=2.0)
            except subprocess.TimeoutExpired:
                self._process.kill()
                self._process.wait()
        logger.info("Stopped %s", self.command[0])
        self._process = None
