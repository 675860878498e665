"""Programmed results: a literal value, a computed value or an error."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Result(ABC):
    """What an expectation produces when it is matched."""

    @abstractmethod
    def resolve(self, arguments: tuple[Any, ...]) -> Any:
        """Produce the value for a call, or raise the programmed error."""
        ...

    @abstractmethod
    def describe(self) -> str: ...


class Returns(Result):
    """Literal value returned unchanged on every call."""

    def __init__(self, value: Any):
        self.value = value

    def resolve(self, arguments: tuple[Any, ...]) -> Any:
        return self.value

    def describe(self) -> str:
        return f"returns {self.value!r}"


class Computed(Result):
    """Value computed from the call arguments.

    Whatever the function raises reaches the caller like a programmed error.
    """

    def __init__(self, fn: Callable[..., Any]):
        self.fn = fn

    def resolve(self, arguments: tuple[Any, ...]) -> Any:
        return self.fn(*arguments)

    def describe(self) -> str:
        return f"returns {getattr(self.fn, '__name__', 'computed')}(...)"


class Raises(Result):
    """Programmed error raised to the caller."""

    def __init__(self, error: BaseException | type[BaseException]):
        self.error = error

    def resolve(self, arguments: tuple[Any, ...]) -> Any:
        raise self.error

    def describe(self) -> str:
        return f"raises {self.error!r}"
