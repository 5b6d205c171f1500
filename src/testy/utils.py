"""Value rendering and collection helpers used by failure messages."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from rich.pretty import pretty_repr

# Wide enough that rich never wraps a rendered value onto several lines.
_SINGLE_LINE_WIDTH = 10_000


def pretty_print(value: Any) -> str:
    """Render ``value`` for a failure message.

    Never raises: objects whose ``__repr__`` blows up fall back to the default
    object representation.
    """
    try:
        return pretty_repr(value, max_width=_SINGLE_LINE_WIDTH)
    except Exception:
        return object.__repr__(value)


def have_same_elements(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Return True when both collections hold the same elements, in any order.

    Duplicates count: ``[1, 1, 2]`` and ``[1, 2, 2]`` are not the same elements.
    """
    first_items = list(first)
    second_items = list(second)
    if len(first_items) != len(second_items):
        return False

    try:
        return Counter(first_items) == Counter(second_items)
    except TypeError:
        # Unhashable elements: match them one by one.
        remaining = list(second_items)
        for item in first_items:
            for index, candidate in enumerate(remaining):
                if candidate == item:
                    del remaining[index]
                    break
            else:
                return False
        return not remaining


__all__ = ["have_same_elements", "pretty_print"]
