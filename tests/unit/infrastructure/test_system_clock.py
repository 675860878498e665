"""Unit tests for SystemClock."""

from datetime import UTC, datetime

from exporter_fs.infrastructure.system_clock import SystemClock
from exporter_fs.ports.clock import ClockPort


class TestSystemClock:
    """Test SystemClock implementation."""

    def test_implements_clock_port(self):
        """Test that SystemClock implements ClockPort."""
        assert isinstance(SystemClock(), ClockPort)

    def test_now_is_utc(self):
        """Test that readings are timezone-aware UTC datetimes."""
        before = datetime.now(UTC)
        now = SystemClock().now()
        after = datetime.now(UTC)

        assert now.tzinfo is UTC
        assert before <= now <= after
