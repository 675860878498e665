"""Clock port used to timestamp recorded calls."""

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Abstract clock interface.

    Call records are stamped through this port so tests of the mock itself
    can pin time.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time as a timezone-aware datetime."""
        ...
