"""Pytest configuration and shared fixtures for exporter-fs tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from exporter_fs.config import MockSettings
from exporter_fs.ports.clock import ClockPort
from exporter_fs.testing.mock_file_system import MockFileSystem

pytest_plugins = ["exporter_fs.testing.plugin", "pytester"]


class RecordingContext:
    """ContextPort that keeps cleanups and failures for inspection."""

    def __init__(self):
        self.cleanups: list[Callable[[], None]] = []
        self.failures: list[str] = []

    def add_cleanup(self, fn: Callable[[], None]) -> None:
        self.cleanups.append(fn)

    def fail(self, message: str) -> None:
        self.failures.append(message)

    def run_cleanups(self) -> None:
        for fn in reversed(self.cleanups):
            fn()


class FixedClock(ClockPort):
    """Clock advancing one second per reading."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)

    def now(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def settings() -> MockSettings:
    """Create strict settings independent of the environment.

    Returns:
        MockSettings instance
    """
    return MockSettings(strict=True, log_level="DEBUG", report_width=120)


@pytest.fixture
def context() -> RecordingContext:
    """Create a recording test context.

    Returns:
        RecordingContext instance
    """
    return RecordingContext()


@pytest.fixture
def clock() -> FixedClock:
    """Create a deterministic clock.

    Returns:
        FixedClock instance
    """
    return FixedClock()


@pytest.fixture
def fs(settings: MockSettings, clock: FixedClock) -> MockFileSystem:
    """Create an unbound MockFileSystem.

    Returns:
        MockFileSystem verified explicitly by the test
    """
    return MockFileSystem(settings=settings, clock=clock)


@pytest.fixture
def bound_fs(
    settings: MockSettings, clock: FixedClock, context: RecordingContext
) -> MockFileSystem:
    """Create a MockFileSystem bound to a recording context.

    Returns:
        MockFileSystem whose teardown is run by the test
    """
    return MockFileSystem.new(context, settings=settings, clock=clock)
