"""Apply a random selection of transformations to a seed value."""

from __future__ import annotations

from functools import reduce
from typing import Callable, TypeVar

from smart_factories.combinators.selection import pluck_many
from smart_factories.core.random_source import RandomSource
from smart_factories.core.ranges import IntRange

T = TypeVar("T")

Transformation = Callable[[T], T]

_EXACTLY_ONE = IntRange.of(1)


def apply_one(
    seed: T,
    *transformations: Transformation[T],
    source: RandomSource | None = None,
) -> T:
    """Apply exactly one of ``transformations`` to ``seed``.

    Useful for objects that need at least one of several fields set::

        person = apply_one(
            person,
            lambda p: replace(p, name="Michael"),
            lambda p: replace(p, cash_tag="$michael"),
            lambda p: replace(p, email="michael@example.com"),
        )
    """
    return apply_many(seed, _EXACTLY_ONE, *transformations, source=source)


def apply_many(
    seed: T,
    count_range: IntRange,
    *transformations: Transformation[T],
    source: RandomSource | None = None,
) -> T:
    """Apply between ``count_range.low`` and ``count_range.high`` transformations.

    The chosen transformations run in the (random) order they were picked,
    each one receiving the previous result. When none are picked ``seed`` is
    returned unchanged.
    """
    chosen = pluck_many(transformations, count_range, source=source)
    return reduce(lambda result, transform: transform(result), chosen, seed)
