"""Context port binding a mock to a test's lifecycle."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContextPort(Protocol):
    """Port for the running test.

    The test runner calls registered cleanups exactly once after the test
    body, whether it passed or failed.
    """

    def add_cleanup(self, fn: Callable[[], None]) -> None:
        """Register a function to run at teardown.

        Args:
            fn: Callable without arguments
        """
        ...

    def fail(self, message: str) -> None:
        """Mark the current test as failed.

        Args:
            message: Failure description shown by the runner
        """
        ...
