"""Argument matchers deciding whether a call satisfies an expectation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Matcher(ABC):
    """Predicate over a single call argument."""

    @abstractmethod
    def matches(self, argument: Any) -> bool:
        """Check whether the argument is accepted."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable form used in diagnostics."""
        ...

    def __repr__(self) -> str:
        return self.describe()


class AnyArgument(Matcher):
    """Accepts every argument."""

    def matches(self, argument: Any) -> bool:
        return True

    def describe(self) -> str:
        return "<any>"


ANY = AnyArgument()


class Equals(Matcher):
    """Accepts arguments equal to a literal value."""

    def __init__(self, expected: Any):
        self.expected = expected

    def matches(self, argument: Any) -> bool:
        return bool(argument == self.expected)

    def describe(self) -> str:
        return repr(self.expected)


class InstanceOf(Matcher):
    """Accepts arguments of a given type."""

    def __init__(self, expected_type: type | tuple[type, ...]):
        self.expected_type = expected_type

    def matches(self, argument: Any) -> bool:
        return isinstance(argument, self.expected_type)

    def describe(self) -> str:
        if isinstance(self.expected_type, tuple):
            names = " | ".join(t.__name__ for t in self.expected_type)
        else:
            names = self.expected_type.__name__
        return f"<instance of {names}>"


class MatchedBy(Matcher):
    """Accepts arguments for which a predicate returns true.

    Exceptions raised by the predicate propagate to the caller.
    """

    def __init__(self, predicate: Callable[[Any], bool], description: str | None = None):
        self.predicate = predicate
        self.description = description or getattr(predicate, "__name__", "predicate")

    def matches(self, argument: Any) -> bool:
        return bool(self.predicate(argument))

    def describe(self) -> str:
        return f"<matched by {self.description}>"


def as_matcher(value: Any) -> Matcher:
    """Wrap a literal in Equals, pass matchers through."""
    if isinstance(value, Matcher):
        return value
    return Equals(value)
