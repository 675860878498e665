"""Expectation entity: one programmed rule of a mock."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from exporter_fs.domain.matchers import Matcher, as_matcher
from exporter_fs.domain.models import ExpectationStatus, UnmetExpectation
from exporter_fs.domain.results import Computed, Raises, Result, Returns

UNLIMITED = 0


class Expectation:
    """Programmed call pattern with its result and repeatability.

    Expectations are built through a fluent API:

        fs.on("read_file", "a.txt").returns(b"hello").once()

    By default an expectation must be matched exactly once. ``times(n)``
    requires exactly ``n`` calls, ``any_times()`` accepts an unlimited number
    of calls but needs at least one, and ``maybe()`` makes it optional.
    """

    def __init__(self, index: int, operation: str, arguments: tuple[Any, ...]):
        self.index = index
        self.operation = operation
        self.matchers: tuple[Matcher, ...] = tuple(as_matcher(a) for a in arguments)
        self.result: Result | None = None
        self.repeatability = 1
        self.optional = False
        self.call_count = 0
        self.violated = False
        self.side_effect: Callable[..., Any] | None = None
        self.prerequisites: list[Expectation] = []

    # Programming API

    def returns(self, value: Any) -> Expectation:
        """Return ``value`` unchanged when matched."""
        self.result = Returns(value)
        return self

    def returns_with(self, fn: Callable[..., Any]) -> Expectation:
        """Compute the result from the call arguments when matched."""
        self.result = Computed(fn)
        return self

    def raises(self, error: BaseException | type[BaseException]) -> Expectation:
        """Raise ``error`` to the caller when matched."""
        self.result = Raises(error)
        return self

    def times(self, count: int) -> Expectation:
        """Require exactly ``count`` calls."""
        if count < 1:
            raise ValueError(f"times() needs a positive count, got {count}")
        self.repeatability = count
        return self

    def once(self) -> Expectation:
        return self.times(1)

    def twice(self) -> Expectation:
        return self.times(2)

    def any_times(self) -> Expectation:
        """Accept any number of calls, at least one."""
        self.repeatability = UNLIMITED
        return self

    def maybe(self) -> Expectation:
        """Don't report this expectation when it is never called."""
        self.optional = True
        return self

    def run(self, fn: Callable[..., Any]) -> Expectation:
        """Call ``fn`` with the arguments before the result is produced."""
        self.side_effect = fn
        return self

    def not_before(self, *expectations: Expectation) -> Expectation:
        """Fail calls made before every given expectation has been called."""
        self.prerequisites.extend(expectations)
        return self

    # Matching

    def accepts(self, operation: str, arguments: tuple[Any, ...]) -> bool:
        """Check operation name and every argument matcher."""
        if operation != self.operation or len(arguments) != len(self.matchers):
            return False
        return all(m.matches(a) for m, a in zip(self.matchers, arguments, strict=True))

    @property
    def is_exhausted(self) -> bool:
        """True once an exact count has been used up."""
        return self.repeatability != UNLIMITED and self.call_count >= self.repeatability

    @property
    def is_satisfied(self) -> bool:
        if self.violated:
            return False
        if self.optional and self.call_count == 0:
            return True
        if self.repeatability == UNLIMITED:
            return self.call_count > 0
        return self.call_count == self.repeatability

    @property
    def status(self) -> ExpectationStatus:
        if self.violated:
            return ExpectationStatus.VIOLATED
        if self.call_count == 0:
            return ExpectationStatus.SATISFIED if self.optional else ExpectationStatus.PENDING
        if self.is_satisfied:
            return ExpectationStatus.SATISFIED
        return ExpectationStatus.PARTIALLY_SATISFIED

    def missing_prerequisites(self) -> list[Expectation]:
        return [e for e in self.prerequisites if e.call_count == 0]

    # Diagnostics

    def describe_arguments(self) -> str:
        return ", ".join(m.describe() for m in self.matchers)

    def describe_count(self) -> str:
        if self.repeatability == UNLIMITED:
            count = "at least 1"
        else:
            count = f"exactly {self.repeatability}"
        return f"{count} (optional)" if self.optional else count

    def describe(self) -> str:
        text = f"{self.operation}({self.describe_arguments()})"
        if self.result is not None:
            text = f"{text} {self.result.describe()}"
        return text

    def to_unmet(self) -> UnmetExpectation:
        return UnmetExpectation(
            operation=self.operation,
            arguments=self.describe_arguments(),
            expected=self.describe_count(),
            actual=self.call_count,
            status=self.status,
        )

    def __repr__(self) -> str:
        return f"Expectation(#{self.index} {self.describe()}, calls={self.call_count})"


def in_order(*expectations: Expectation) -> None:
    """Require the expectations to be first called in the given order."""
    for previous, current in zip(expectations, expectations[1:]):
        current.not_before(previous)
