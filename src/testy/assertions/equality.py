"""Equality comparison used by ``is_equal_to`` / ``is_not_equal_to``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from testy.utils import pretty_print


@dataclass(frozen=True, slots=True)
class EqualityResult:
    """Outcome of comparing two values.

    Attributes:
    ----------
    comparison_result: bool
        Whether the values are considered equal
    additional_failure_message: str
        Detail appended to the generic failure message
    override_failure_message: str | None
        Complete failure message replacing the generic one
    """

    comparison_result: bool
    additional_failure_message: str = ""
    override_failure_message: str | None = None


class EqualityAssertionStrategy:
    """Pick how two values are compared, based on the criteria and the values."""

    @classmethod
    def evaluate(
        cls,
        actual: Any,
        expected: Any,
        criteria: Callable[[Any, Any], Any] | str | None = None,
        translate: Callable[[str], str] | None = None,
    ) -> EqualityResult:
        translate = translate or _identity

        if callable(criteria):
            return EqualityResult(
                bool(criteria(actual, expected)),
                additional_failure_message=f" ({translate('using_custom_criteria')})",
            )

        if isinstance(criteria, str):
            method = getattr(actual, criteria, None)
            if not callable(method):
                message = translate("missing_equality_method").format(
                    actual=pretty_print(actual), method=criteria
                )
                return EqualityResult(False, override_failure_message=message)
            return EqualityResult(
                bool(method(expected)),
                additional_failure_message=f" ({translate('using_method')} {criteria})",
            )

        equals = getattr(actual, "equals", None)
        if callable(equals):
            return EqualityResult(bool(equals(expected)))

        return EqualityResult(deep_equals(actual, expected))


def _identity(key: str) -> str:
    return key


def _has_default_eq(value: Any) -> bool:
    return type(value).__eq__ is object.__eq__


def deep_equals(actual: Any, expected: Any) -> bool:
    """Structural equality.

    Mappings compare key by key, lists and tuples element by element in order,
    and plain objects (no custom ``__eq__``) by type and attributes. Cycles are
    assumed equal when revisited.
    """
    return _deep_equals(actual, expected, set())


def _deep_equals(actual: Any, expected: Any, in_progress: set[tuple[int, int]]) -> bool:
    if actual is expected:
        return True

    pair = (id(actual), id(expected))
    if pair in in_progress:
        return True

    if isinstance(actual, Mapping) and isinstance(expected, Mapping):
        if actual.keys() != expected.keys():
            return False
        in_progress.add(pair)
        try:
            return all(_deep_equals(actual[key], expected[key], in_progress) for key in actual)
        finally:
            in_progress.discard(pair)

    if isinstance(actual, (list, tuple)) and isinstance(expected, (list, tuple)):
        if type(actual) is not type(expected) or len(actual) != len(expected):
            return False
        in_progress.add(pair)
        try:
            return all(
                _deep_equals(left, right, in_progress) for left, right in zip(actual, expected)
            )
        finally:
            in_progress.discard(pair)

    if (
        type(actual) is type(expected)
        and _has_default_eq(actual)
        and hasattr(actual, "__dict__")
    ):
        return _deep_equals(vars(actual), vars(expected), in_progress)

    return bool(actual == expected)


__all__ = ["EqualityAssertionStrategy", "EqualityResult", "deep_equals"]
