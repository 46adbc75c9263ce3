"""Runs a motion on a dedicated background thread."""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Callable, Optional

from .flags import RunFlag

if TYPE_CHECKING:
    from ..motion import Motion

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL = 0.05


class AnimationScheduler:
    """Drives ``Motion.update()`` at a fixed cadence until stopped.

    The motion is built from *motion_factory* on the animation thread and
    is owned by that thread alone, so rendering state needs no locking.
    Whatever ends the loop, the motion is closed before the thread exits,
    which restores the cursor and colors.

    Usage::

        animation = AnimationScheduler(CrabMotion)
        animation.start()
        ...
        if not animation.stop():
            logger.warning("Animation thread did not exit cleanly")
    """

    def __init__(
        self,
        motion_factory: Callable[[], Motion],
        interval: float = DEFAULT_FRAME_INTERVAL,
    ):
        self.motion_factory = motion_factory
        self.interval = interval

        self.running = RunFlag()
        self.update_count = 0
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _loop(self) -> None:
        """Animation thread body."""
        try:
            motion = self.motion_factory()
        except Exception as exc:
            self.error = exc
            logger.debug("Motion construction failed", exc_info=True)
            return

        try:
            while self.running.is_set():
                motion.update()
                self.update_count += 1
                time.sleep(self.interval)
        except Exception as exc:
            self.error = exc
            logger.debug("Animation loop failed", exc_info=True)
        finally:
            motion.close()

    def start(self) -> tuple[threading.Thread, RunFlag]:
        """Spawn the animation thread.

        Returns the thread handle and the shared run flag.
        """
        if self._thread is not None:
            raise RuntimeError("Animation already started")

        self._thread = threading.Thread(target=self._loop, name="busycrab-animation")
        self._thread.start()
        return self._thread, self.running

    def stop(self) -> bool:
        """Signal the thread to stop and wait for it to finish.

        Returns True when the thread exited without an error.
        """
        self.running.clear()
        if self._thread is not None:
            self._thread.join()
        return self.error is None
