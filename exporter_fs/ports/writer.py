"""Writer port returned by FileSystemPort.open_file."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol, runtime_checkable


@runtime_checkable
class WriterPort(Protocol):
    """Port for a byte sink owned by the caller.

    Writers are released with close() or by using them as context managers,
    which close on every exit path.
    """

    def write(self, data: bytes) -> int:
        """Write bytes and return the number written."""
        ...

    def close(self) -> None:
        """Release the writer."""
        ...

    def __enter__(self) -> WriterPort: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...
