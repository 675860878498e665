"""Test doubles for exporter-fs ports."""

from exporter_fs.testing.context import PytestContext, UnittestContext, as_test_context
from exporter_fs.testing.mock import Mock
from exporter_fs.testing.mock_file_system import OPEN_FILE, READ_FILE, MockFileSystem
from exporter_fs.testing.report import render_report
from exporter_fs.testing.writer import BufferWriter

__all__ = [
    "OPEN_FILE",
    "READ_FILE",
    "BufferWriter",
    "Mock",
    "MockFileSystem",
    "PytestContext",
    "UnittestContext",
    "as_test_context",
    "render_report",
]
