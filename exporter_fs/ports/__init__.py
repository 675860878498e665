"""Ports (interfaces) for exporter-fs following hexagonal architecture."""

from exporter_fs.ports.clock import ClockPort
from exporter_fs.ports.context import ContextPort
from exporter_fs.ports.file_system import FileSystemPort
from exporter_fs.ports.logger import LoggerPort
from exporter_fs.ports.writer import WriterPort

__all__ = [
    "ClockPort",
    "ContextPort",
    "FileSystemPort",
    "LoggerPort",
    "WriterPort",
]
