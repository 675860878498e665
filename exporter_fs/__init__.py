"""Pluggable file-system port for the exporter with a verifiable mock."""

from exporter_fs.config import MockSettings
from exporter_fs.domain import (
    ANY,
    CallRecord,
    Equals,
    Expectation,
    ExpectationError,
    ExporterFsError,
    InstanceOf,
    MatchedBy,
    Matcher,
    MissingReturnError,
    MockError,
    MockStateError,
    OrderViolationError,
    ResultTypeError,
    UnexpectedCallError,
    VerificationReport,
    in_order,
)
from exporter_fs.ports import FileSystemPort, WriterPort
from exporter_fs.testing import BufferWriter, MockFileSystem

__version__ = "0.1.0"

__all__ = [
    "ANY",
    "BufferWriter",
    "CallRecord",
    "Equals",
    "Expectation",
    "ExpectationError",
    "ExporterFsError",
    "FileSystemPort",
    "InstanceOf",
    "MatchedBy",
    "Matcher",
    "MissingReturnError",
    "MockError",
    "MockFileSystem",
    "MockSettings",
    "MockStateError",
    "OrderViolationError",
    "ResultTypeError",
    "UnexpectedCallError",
    "VerificationReport",
    "WriterPort",
    "in_order",
]
