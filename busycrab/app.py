"""BusyCrab application - keeps the workstation awake and looking busy.

BusyCrab wires together:
- SleepPreventer: platform backend asked to keep the system awake each cycle
- MouseController: nudges the pointer out and back each cycle
- AnimationScheduler: optional terminal animation on its own thread

The activity loop runs on the main thread. It waits between cycles in
short slices so Ctrl+C is honored quickly, and on the way out it stops
and joins the animation before anything else is printed.
"""

from __future__ import annotations

import logging
import signal
import threading
import time
from enum import Enum
from typing import Callable, Optional

from .config import BusyCrabConfig
from .core.animation import AnimationScheduler
from .core.flags import KeepRunning
from .motion import MotionFactory, get_motion_factory
from .mouse import MouseController, PyAutoGUIMouse
from .platform import SleepPreventer, get_platform

logger = logging.getLogger(__name__)

BANNER = "\U0001F980 BusyCrab"


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class BusyCrab:
    """Main application object."""

    def __init__(
        self,
        config: Optional[BusyCrabConfig] = None,
        mouse: Optional[MouseController] = None,
        platform: Optional[SleepPreventer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or BusyCrabConfig()
        self._mouse = mouse
        self.platform = platform if platform is not None else get_platform()
        self.motion_factory: Optional[MotionFactory] = get_motion_factory(self.config.motion)
        self._sleep = sleep

        self.state = LoopState.STOPPED
        self.activity_count = 0
        self.interrupted = False
        self._previous_handler = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def mouse(self) -> MouseController:
        if self._mouse is None:
            self._mouse = PyAutoGUIMouse()
        return self._mouse

    @property
    def interval(self) -> float:
        return self.config.interval

    @property
    def wiggle_distance(self) -> int:
        return self.config.wiggle

    @property
    def verbose(self) -> bool:
        return self.config.verbose

    @property
    def has_motion(self) -> bool:
        return self.motion_factory is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Run until Ctrl+C. Sleep-prevention failures propagate."""
        self.display_startup_info()
        animation = None
        try:
            # Handler first: once installed, Ctrl+C no longer raises
            # KeyboardInterrupt, so the animation thread is always joined.
            keep_running = self.setup_shutdown_signal()
            animation = self.start_animation()
            self.run_activity_loop(keep_running)
        finally:
            self.cleanup(animation)
        self.display_shutdown_message()

    def display_startup_info(self) -> None:
        print(f"{BANNER} started. Press Ctrl+C to exit.", flush=True)
        print(
            f"Running with interval: {self.interval} seconds, wiggle: {self.wiggle_distance} pixels",
            flush=True,
        )

    def display_shutdown_message(self) -> None:
        print("", flush=True)
        print(f"{BANNER} shut down successfully.", flush=True)

    def setup_shutdown_signal(self) -> KeepRunning:
        """Install a SIGINT handler that clears the returned flag."""
        keep_running = KeepRunning()

        def handler(signum, frame):
            self.interrupted = True
            keep_running.stop()

        if threading.current_thread() is threading.main_thread():
            self._previous_handler = signal.signal(signal.SIGINT, handler)
        else:
            logger.debug("Not on the main thread, Ctrl+C handler not installed")
        return keep_running

    def start_animation(self) -> Optional[AnimationScheduler]:
        if self.motion_factory is None:
            return None
        animation = AnimationScheduler(self.motion_factory, self.config.frame_interval)
        animation.start()
        logger.debug("Animation started (%s)", self.config.motion)
        return animation

    def cleanup(self, animation: Optional[AnimationScheduler]) -> None:
        """Stop the animation, release the platform and restore SIGINT."""
        if animation is not None and not animation.stop():
            if self.verbose:
                print("", flush=True)
                print("Animation thread did not exit cleanly", flush=True)
            logger.info("Animation thread failed", exc_info=animation.error)

        if self.interrupted:
            print(f"\n{BANNER} caught Ctrl+C, shutting down gracefully...", flush=True)

        self.platform.release()

        if self._previous_handler is not None:
            signal.signal(signal.SIGINT, self._previous_handler)
            self._previous_handler = None

    # ------------------------------------------------------------------
    # Activity loop
    # ------------------------------------------------------------------

    def run_activity_loop(self, keep_running: KeepRunning) -> None:
        self.state = LoopState.RUNNING
        try:
            while keep_running.is_set():
                self.execute_activity_cycle()
                if not self.wait_for_next_cycle(keep_running):
                    break
        finally:
            self.state = LoopState.STOPPED

    def execute_activity_cycle(self) -> int:
        """Prevent sleep, wiggle the mouse and count the cycle.

        Raises SleepPreventionError before anything else happens if the
        platform refuses; the counter is left unchanged.
        """
        self.platform.prevent_sleep()
        self.simulate_activity()

        self.activity_count += 1
        self.log_activity_status()
        return self.activity_count

    def simulate_activity(self) -> None:
        """Move the mouse out and back so its net position is unchanged."""
        if self.verbose:
            print(f"\rMoving mouse by {self.wiggle_distance} pixels", flush=True)

        self.mouse.move_relative(self.wiggle_distance, 0)
        self._sleep(self.config.wiggle_pause)
        self.mouse.move_relative(-self.wiggle_distance, 0)

    def log_activity_status(self) -> None:
        logger.debug("Activity cycle #%d completed", self.activity_count)
        if self.verbose:
            print(
                f"\rActivity cycle #{self.activity_count} completed. "
                f"Next update in {self.interval} seconds.",
                flush=True,
            )

    def wait_for_next_cycle(self, keep_running: KeepRunning) -> bool:
        """Sleep up to the interval in small slices.

        Returns False as soon as a slice ends with the flag cleared.
        """
        remaining = float(self.interval)
        # tolerance absorbs float drift from repeated subtraction
        while remaining > 1e-9 and keep_running.is_set():
            step = min(remaining, self.config.poll_slice)
            self._sleep(step)
            remaining -= step
        return keep_running.is_set()
