"""File system port for the exporter's file operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from exporter_fs.ports.writer import WriterPort


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for file system operations."""

    def open_file(self, path: str) -> WriterPort:
        """Open a file for writing.

        Args:
            path: File path, must not be empty

        Returns:
            Writer owned by the caller, who must close it

        Raises:
            OSError: If the file can't be opened for writing
        """
        ...

    def read_file(self, path: str) -> bytes:
        """Read the full contents of a file.

        Args:
            path: File path

        Returns:
            Complete file contents

        Raises:
            FileNotFoundError: If file doesn't exist
            OSError: If unable to read file
        """
        ...
