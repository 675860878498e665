"""Infrastructure adapters for exporter-fs."""

from exporter_fs.infrastructure.simple_logger import SimpleLogger
from exporter_fs.infrastructure.system_clock import SystemClock

__all__ = [
    "SimpleLogger",
    "SystemClock",
]
