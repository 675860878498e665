"""Value objects recorded and reported by mocks."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ExpectationStatus(str, Enum):
    """Lifecycle of a single expectation."""

    PENDING = "pending"
    PARTIALLY_SATISFIED = "partially_satisfied"
    SATISFIED = "satisfied"
    VIOLATED = "violated"


class MockPhase(str, Enum):
    """Lifecycle of a mock; there is no way back from VERIFYING."""

    PROGRAMMING = "programming"
    VERIFYING = "verifying"


class CallRecord(BaseModel):
    """One invocation made against a mock."""

    sequence: int = Field(..., ge=0, description="Position in the call log")
    operation: str = Field(..., min_length=1, description="Invoked operation")
    arguments: tuple[Any, ...] = Field(default=(), description="Positional call arguments")
    timestamp: datetime = Field(..., description="When the call was recorded")
    matched: bool = Field(..., description="Whether an expectation accepted the call")
    expectation_index: int | None = Field(
        None, ge=0, description="Registration index of the matched expectation"
    )

    def describe(self) -> str:
        """Format as operation(arg, ...)."""
        return f"{self.operation}({', '.join(repr(a) for a in self.arguments)})"

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class UnmetExpectation(BaseModel):
    """Expectation that was not satisfied at verification time."""

    operation: str = Field(..., description="Expected operation")
    arguments: str = Field(..., description="Description of the argument matchers")
    expected: str = Field(..., description="Required call count")
    actual: int = Field(..., ge=0, description="Number of matched calls")
    status: ExpectationStatus = Field(..., description="Status at verification")

    model_config = {"frozen": True, "strict": True}


class VerificationReport(BaseModel):
    """Aggregate result of verifying a mock."""

    mock_name: str = Field(..., description="Name of the verified mock")
    strict: bool = Field(default=True, description="Unexpected calls fail verification")
    unmet: list[UnmetExpectation] = Field(default_factory=list)
    unexpected: list[CallRecord] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when nothing unmet, and no unexpected call under strict mode."""
        if self.unmet:
            return False
        return not (self.strict and self.unexpected)

    def summary(self) -> str:
        """One-line description of the outcome."""
        parts = []
        if self.unmet:
            parts.append(f"{len(self.unmet)} unmet expectation(s)")
        if self.unexpected:
            parts.append(f"{len(self.unexpected)} unexpected call(s)")
        if not parts:
            return f"{self.mock_name}: all expectations met"
        return f"{self.mock_name}: " + ", ".join(parts)
