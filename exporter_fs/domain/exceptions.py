"""Exceptions raised by exporter-fs mocks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from exporter_fs.domain.models import VerificationReport


class ExporterFsError(Exception):
    """Base exception for all exporter-fs errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MockError(ExporterFsError, AssertionError):
    """Misuse of a mock by the test or by the code under test.

    Subclasses AssertionError so test runners report these as failures.
    """

    pass


class UnexpectedCallError(MockError):
    """Raised when a call matches no un-exhausted expectation."""

    def __init__(
        self,
        operation: str,
        arguments: tuple[Any, ...],
        reason: str | None = None,
        candidates: list[str] | None = None,
    ):
        formatted = ", ".join(repr(a) for a in arguments)
        message = f"Unexpected call {operation}({formatted})"
        if reason:
            message = f"{message}: {reason}"
        if candidates:
            message = f"{message}\nRegistered for {operation}:\n  " + "\n  ".join(candidates)
        super().__init__(
            message,
            details={"operation": operation, "arguments": arguments, "candidates": candidates or []},
        )
        self.operation = operation
        self.arguments = arguments
        self.reason = reason


class MissingReturnError(MockError):
    """Raised when a matched expectation has no configured result."""

    def __init__(self, operation: str):
        super().__init__(
            f"no return value specified for {operation}",
            details={"operation": operation},
        )
        self.operation = operation


class ResultTypeError(MockError):
    """Raised when a programmed result has the wrong shape for an operation."""

    def __init__(self, operation: str, expected: str, actual: Any):
        super().__init__(
            f"{operation} must return {expected}, got {type(actual).__name__}",
            details={"operation": operation, "expected": expected, "actual": type(actual).__name__},
        )
        self.operation = operation


class OrderViolationError(MockError):
    """Raised when an expectation is hit before its prerequisites."""

    def __init__(self, expectation: str, missing: list[str]):
        super().__init__(
            f"{expectation} called before " + ", ".join(missing),
            details={"expectation": expectation, "missing": missing},
        )


class MockStateError(MockError):
    """Raised when a mock is used after teardown verification began."""

    def __init__(self, action: str):
        super().__init__(
            f"Cannot {action}: mock is already verifying",
            details={"action": action},
        )


class ExpectationError(MockError):
    """Verification or call assertion failure."""

    def __init__(self, message: str, report: VerificationReport | None = None):
        super().__init__(message)
        self.report = report
