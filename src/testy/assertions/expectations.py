"""What a ``raises`` / ``does_not_raise`` check expects the callable to raise."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class ExactError:
    """Matches only the very same exception object."""

    value: Any

    def matches(self, error: BaseException) -> bool:
        return error is self.value


@dataclass(frozen=True, slots=True)
class ErrorPattern:
    """Matches when the pattern is found in ``"<ErrorClass>: <message>"``."""

    pattern: re.Pattern[str]

    def matches(self, error: BaseException) -> bool:
        return self.pattern.search(f"{type(error).__name__}: {error}") is not None


@dataclass(frozen=True, slots=True)
class ErrorType:
    """Matches instances of an exception class (or tuple of classes)."""

    error_class: type[BaseException] | tuple[type[BaseException], ...]

    def matches(self, error: BaseException) -> bool:
        return isinstance(error, self.error_class)


ErrorExpectation = Union[ExactError, ErrorPattern, ErrorType]


def as_error_expectation(expectation: Any) -> ErrorExpectation:
    """Coerce a plain argument into an explicit expectation.

    Compiled patterns match by message, exception classes by type, and any
    other value by identity.
    """
    if isinstance(expectation, (ExactError, ErrorPattern, ErrorType)):
        return expectation
    if isinstance(expectation, re.Pattern):
        return ErrorPattern(expectation)
    if isinstance(expectation, type) and issubclass(expectation, BaseException):
        return ErrorType(expectation)
    return ExactError(expectation)


__all__ = [
    "ErrorExpectation",
    "ErrorPattern",
    "ErrorType",
    "ExactError",
    "as_error_expectation",
]
