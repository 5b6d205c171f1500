"""Assertion checks and the entry points test bodies use to reach them."""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from testy.assertions.equality import EqualityAssertionStrategy
from testy.assertions.expectations import as_error_expectation
from testy.testing.context import Reporter
from testy.testing.result import TestResult
from testy.utils import have_same_elements, pretty_print


class Assertion:
    """Checks against a single actual value.

    Every check reports exactly one result through the reporter and returns it.
    Failures do not raise (unless the running test is in fail-fast mode).
    """

    def __init__(self, reporter: Reporter, actual: Any) -> None:
        self._reporter = reporter
        self._actual = actual

    # Boolean assertions

    def is_true(self) -> TestResult:
        return self._report_assertion_result(self._actual is True, self._t("be_true"))

    def is_false(self) -> TestResult:
        return self._report_assertion_result(self._actual is False, self._t("be_false"))

    # None assertions

    def is_none(self) -> TestResult:
        return self._report_assertion_result(self._actual is None, self._t("be_none"))

    def is_not_none(self) -> TestResult:
        return self._report_assertion_result(self._actual is not None, self._t("be_not_none"))

    # Equality assertions

    def is_equal_to(
        self, expected: Any, criteria: Callable[[Any, Any], Any] | str | None = None
    ) -> TestResult:
        return self._equality_assertion(expected, criteria, should_be_equal=True)

    def is_not_equal_to(
        self, expected: Any, criteria: Callable[[Any, Any], Any] | str | None = None
    ) -> TestResult:
        return self._equality_assertion(expected, criteria, should_be_equal=False)

    # Collection assertions

    def includes(self, item: Any) -> TestResult:
        message = f"{self._t('include')} {pretty_print(item)}"
        return self._report_assertion_result(item in self._actual, message)

    def does_not_include(self, item: Any) -> TestResult:
        message = f"{self._t('not_include')} {pretty_print(item)}"
        return self._report_assertion_result(item not in self._actual, message)

    def includes_exactly(self, *items: Any) -> TestResult:
        message = f"{self._t('include_exactly')} {pretty_print(list(items))}"
        return self._report_assertion_result(have_same_elements(self._actual, items), message)

    def is_empty(self) -> TestResult:
        return self._report_assertion_result(len(self._actual) == 0, self._t("be_empty"))

    def is_not_empty(self) -> TestResult:
        return self._report_assertion_result(len(self._actual) > 0, self._t("be_not_empty"))

    # String assertions

    def matches(self, pattern: str | re.Pattern[str]) -> TestResult:
        message = f"{self._t('match')} {pretty_print(pattern)}"
        return self._report_assertion_result(re.search(pattern, self._actual) is not None, message)

    # Exception assertions

    def raises(self, error_expectation: Any) -> TestResult:
        return self._exception_assertion(error_expectation, should_raise=True)

    def does_not_raise(self, not_expected_error: Any) -> TestResult:
        return self._exception_assertion(not_expected_error, should_raise=False)

    def does_not_raise_any_errors(self) -> TestResult:
        try:
            self._actual()
        except Exception as error:
            message = (
                f"{self._t('expected_no_errors')}, {self._t('but')} "
                f"{pretty_print(error)} {self._t('was_raised')}"
            )
            return self._report_assertion_result(False, message, message_is_complete=True)
        return self._report_assertion_result(True, "", message_is_complete=True)

    # Numeric assertions

    def is_near_to(self, number: float, precision_digits: int = 4) -> TestResult:
        # Rounded equality, not a tolerance: the actual value is rounded to
        # ``precision_digits`` decimals, ties away from zero, and compared
        # exactly against ``number``.
        quantum = Decimal(1).scaleb(-precision_digits)
        rounded = float(Decimal(self._actual).quantize(quantum, rounding=ROUND_HALF_UP))
        precision = self._t("using_precision_digits").format(digits=precision_digits)
        message = f"{self._t('be_near_to')} {number} ({precision})"
        return self._report_assertion_result(rounded == number, message)

    # Private

    def _equality_assertion(
        self,
        expected: Any,
        criteria: Callable[[Any, Any], Any] | str | None,
        should_be_equal: bool,
    ) -> TestResult:
        result = EqualityAssertionStrategy.evaluate(
            self._actual, expected, criteria, translate=self._t
        )
        was_success = result.comparison_result if should_be_equal else not result.comparison_result

        if result.override_failure_message:
            return self._report_assertion_result(
                was_success, result.override_failure_message, message_is_complete=True
            )

        expectation = self._t("be_equal_to") if should_be_equal else self._t("be_not_equal_to")
        message = f"{expectation} {pretty_print(expected)}{result.additional_failure_message}"
        return self._report_assertion_result(was_success, message)

    def _exception_assertion(self, error_expectation: Any, should_raise: bool) -> TestResult:
        expectation = as_error_expectation(error_expectation)
        actual_error: Exception | None = None
        try:
            self._actual()
        except Exception as error:
            actual_error = error

        if actual_error is None:
            was_success = not should_raise
        else:
            matched = expectation.matches(actual_error)
            was_success = matched if should_raise else not matched

        to_happen_or_not = self._t("to_happen") if should_raise else self._t("not_to_happen")
        message = (
            f"{self._t('expected')} {self._t('expecting_error')} "
            f"{pretty_print(error_expectation)} {to_happen_or_not}"
        )
        if actual_error is not None:
            message += f", {self._t('but_got')} {pretty_print(actual_error)} {self._t('instead')}"
        return self._report_assertion_result(was_success, message, message_is_complete=True)

    def _report_assertion_result(
        self, was_success: bool, message: str, message_is_complete: bool = False
    ) -> TestResult:
        if was_success:
            return self._reporter.report(TestResult.success())

        if not message_is_complete:
            parts = (self._t("expected"), pretty_print(self._actual), self._t("to"), message)
            message = " ".join(part for part in parts if part)
        return self._reporter.report(TestResult.failure(message))

    def _t(self, key: str) -> str:
        return self._reporter.translate(key)


class Asserter:
    """Entry point for assertions: ``asserter.that(actual).is_equal_to(...)``."""

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter

    def that(self, actual: Any) -> Assertion:
        return Assertion(self._reporter, actual)

    def is_true(self, actual: Any) -> TestResult:
        return self.that(actual).is_true()

    def is_false(self, actual: Any) -> TestResult:
        return self.that(actual).is_false()

    def is_none(self, actual: Any) -> TestResult:
        return self.that(actual).is_none()

    def is_not_none(self, actual: Any) -> TestResult:
        return self.that(actual).is_not_none()

    def are_equal(
        self, actual: Any, expected: Any, criteria: Callable[[Any, Any], Any] | str | None = None
    ) -> TestResult:
        return self.that(actual).is_equal_to(expected, criteria)

    def are_not_equal(
        self, actual: Any, expected: Any, criteria: Callable[[Any, Any], Any] | str | None = None
    ) -> TestResult:
        return self.that(actual).is_not_equal_to(expected, criteria)

    def is_empty(self, actual: Any) -> TestResult:
        return self.that(actual).is_empty()

    def is_not_empty(self, actual: Any) -> TestResult:
        return self.that(actual).is_not_empty()


class FailureGenerator:
    """Fails the running test explicitly: ``fail.with_description("reason")``."""

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter

    def with_description(self, description: str | None = None) -> TestResult:
        message = description or self._reporter.translate("explicitly_failed")
        return self._reporter.report(TestResult.failure(message))


class PendingMarker:
    """Marks the running test as pending: ``pending.due_to("reason")``."""

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter

    def due_to(self, reason: str | None = None) -> TestResult:
        return self._reporter.report(TestResult.explicitly_marked_as_pending(reason))


__all__ = ["Asserter", "Assertion", "FailureGenerator", "PendingMarker"]
