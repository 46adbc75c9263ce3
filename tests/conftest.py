"""Shared test fixtures."""

import io
from typing import Optional

import pytest

from busycrab.core.terminal import Terminal
from busycrab.errors import SleepPreventionError


class FakeScreen:
    """Terminal size source plus captured output, resizable between frames."""

    def __init__(self, size: Optional[tuple[int, int]] = (80, 24)):
        self.size = size
        self.stream = io.StringIO()
        self.terminal = Terminal(self.stream, size_query=lambda: self.size)

    @property
    def output(self) -> str:
        return self.stream.getvalue()

    def reset_output(self) -> None:
        self.stream.seek(0)
        self.stream.truncate()


class MockMouse:
    """Records move_relative calls."""

    def __init__(self):
        self.calls: list[tuple[int, int]] = []

    def move_relative(self, dx: int, dy: int) -> None:
        self.calls.append((dx, dy))


class MockPlatform:
    """Counts prevent_sleep calls and optionally fails them."""

    def __init__(self, error: Optional[str] = None):
        self.error = error
        self.prevent_sleep_calls = 0
        self.released = False

    def prevent_sleep(self) -> None:
        self.prevent_sleep_calls += 1
        if self.error is not None:
            raise SleepPreventionError(self.error)

    def release(self) -> None:
        self.released = True


@pytest.fixture
def screen():
    """An 80x24 fake terminal."""
    return FakeScreen()


@pytest.fixture
def make_screen():
    """Factory for fake terminals of a given size (None = unavailable)."""
    return FakeScreen


@pytest.fixture
def mock_mouse():
    return MockMouse()


@pytest.fixture
def mock_platform():
    return MockPlatform()


@pytest.fixture
def failing_platform():
    return MockPlatform(error="Test error")


class RecordingSleep:
    """time.sleep replacement that returns immediately and records durations.

    *on_call* runs after each recorded sleep, letting a test stop the loop
    after a given number of slices.
    """

    def __init__(self, on_call=None):
        self.calls: list[float] = []
        self.on_call = on_call

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.on_call is not None:
            self.on_call(len(self.calls))


@pytest.fixture
def no_sleep():
    return RecordingSleep()


@pytest.fixture
def make_sleep():
    """Factory for RecordingSleep with a per-call hook."""
    return RecordingSleep
