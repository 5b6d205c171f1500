"""Assertion library for test bodies."""

from .assertion import Asserter, Assertion, FailureGenerator, PendingMarker
from .equality import EqualityAssertionStrategy, EqualityResult, deep_equals
from .expectations import (
    ErrorExpectation,
    ErrorPattern,
    ErrorType,
    ExactError,
    as_error_expectation,
)

__all__ = [
    "Asserter",
    "Assertion",
    "EqualityAssertionStrategy",
    "EqualityResult",
    "ErrorExpectation",
    "ErrorPattern",
    "ErrorType",
    "ExactError",
    "FailureGenerator",
    "PendingMarker",
    "as_error_expectation",
    "deep_equals",
]
