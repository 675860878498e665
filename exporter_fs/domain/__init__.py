"""Domain layer for exporter-fs mocks."""

from exporter_fs.domain.exceptions import (
    ExpectationError,
    ExporterFsError,
    MissingReturnError,
    MockError,
    MockStateError,
    OrderViolationError,
    ResultTypeError,
    UnexpectedCallError,
)
from exporter_fs.domain.expectation import Expectation, in_order
from exporter_fs.domain.matchers import ANY, AnyArgument, Equals, InstanceOf, MatchedBy, Matcher
from exporter_fs.domain.models import (
    CallRecord,
    ExpectationStatus,
    MockPhase,
    UnmetExpectation,
    VerificationReport,
)
from exporter_fs.domain.results import Computed, Raises, Result, Returns

__all__ = [
    "ANY",
    "AnyArgument",
    "CallRecord",
    "Computed",
    "Equals",
    "Expectation",
    "ExpectationError",
    "ExpectationStatus",
    "ExporterFsError",
    "InstanceOf",
    "MatchedBy",
    "Matcher",
    "MissingReturnError",
    "MockError",
    "MockPhase",
    "MockStateError",
    "OrderViolationError",
    "Raises",
    "Result",
    "ResultTypeError",
    "Returns",
    "UnexpectedCallError",
    "UnmetExpectation",
    "VerificationReport",
    "in_order",
]
