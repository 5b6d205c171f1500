"""Test outcome state machine.

Provides the immutable results, the sticky-result test and a sequential runner.
"""

from .context import (
    TEST_CONTEXT,
    CurrentTestReporter,
    FailFastAbort,
    Reporter,
    ResultReporter,
    TestContext,
    current_test_context,
    current_test_scope,
)
from .result import ResultKind, TestResult
from .runner import Runner, RunSummary
from .test import Test, TestCallbacks


__all__ = [
    "TEST_CONTEXT",
    "CurrentTestReporter",
    "FailFastAbort",
    "Reporter",
    "ResultKind",
    "ResultReporter",
    "RunSummary",
    "Runner",
    "Test",
    "TestCallbacks",
    "TestContext",
    "TestResult",
    "current_test_context",
    "current_test_scope",
]
