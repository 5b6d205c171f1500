"""Testy - a minimal unit-testing engine."""

from .assertions import Asserter, Assertion, FailureGenerator, PendingMarker
from .config import TestyConfig, load_config
from .testing import (
    CurrentTestReporter,
    ResultKind,
    Runner,
    RunSummary,
    Test,
    TestCallbacks,
    TestResult,
)
from .ui import ConsoleUI
from .version import __version__


_current_test_reporter = CurrentTestReporter()

asserter = Asserter(_current_test_reporter)
assert_that = asserter.that
fail = FailureGenerator(_current_test_reporter)
pending = PendingMarker(_current_test_reporter)


__all__ = [
    # Test bodies
    "asserter",
    "assert_that",
    "fail",
    "pending",
    # Assertions
    "Asserter",
    "Assertion",
    "FailureGenerator",
    "PendingMarker",
    # Results and execution
    "ResultKind",
    "TestResult",
    "Test",
    "TestCallbacks",
    "Runner",
    "RunSummary",
    # Configuration and presentation
    "TestyConfig",
    "load_config",
    "ConsoleUI",
]
