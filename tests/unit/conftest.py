"""Shared fixtures for unit tests."""

from collections.abc import Callable
from typing import Any

import pytest

from testy.i18n import I18n
from testy.testing import ResultReporter, Test, TestCallbacks


class RecordingCallbacks:
    """Records which lifecycle callback fired, and for which test."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def callbacks(self) -> TestCallbacks:
        return TestCallbacks(
            on_pending=lambda test: self.calls.append(("pending", test.name)),
            on_skipped=lambda test: self.calls.append(("skipped", test.name)),
            on_success=lambda test: self.calls.append(("success", test.name)),
            on_failure=lambda test: self.calls.append(("failure", test.name)),
            on_error=lambda test: self.calls.append(("error", test.name)),
        )

    @property
    def fired(self) -> list[str]:
        return [kind for kind, _ in self.calls]


@pytest.fixture
def recorder() -> RecordingCallbacks:
    return RecordingCallbacks()


@pytest.fixture
def run_body(recorder: RecordingCallbacks) -> Callable[..., Test]:
    """Run a body as a test named ``sample`` and return the finished test."""

    def _run(body: Callable[[], Any] | None, fail_fast: bool = False) -> Test:
        test = Test("sample", body, recorder.callbacks())
        test.run(fail_fast=fail_fast)
        return test

    return _run


@pytest.fixture
def recording_test() -> Test:
    """A test that is never run, used as a sink for reported results."""
    return Test("sink", lambda: None)


@pytest.fixture
def reporter(recording_test: Test) -> ResultReporter:
    return ResultReporter.for_test(recording_test, I18n().translate)
