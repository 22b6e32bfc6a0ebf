"""Turn a count range plus a generator into a list of generated values."""

from __future__ import annotations

from typing import Callable, TypeVar

from smart_factories.core.primitives import random_int_in_range
from smart_factories.core.random_source import RandomSource
from smart_factories.core.ranges import IntRange, check_count_range

T = TypeVar("T")


def expand(
    count_range: IntRange,
    generator: Callable[[], T],
    *,
    source: RandomSource | None = None,
) -> list[T]:
    """Call ``generator`` n times, n drawn from ``count_range`` on every call.

    A range starting at 0 may produce an empty list; ``IntRange(0, 0)``
    always does.
    """
    count = random_int_in_range(check_count_range(count_range), source=source)
    return [generator() for _ in range(count)]
