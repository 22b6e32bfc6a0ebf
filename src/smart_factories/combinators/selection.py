"""Pick one or many values out of a candidate set."""

from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from smart_factories.core.primitives import random_int
from smart_factories.core.random_source import RandomSource, resolve_source
from smart_factories.core.ranges import IntRange, check_count_range
from smart_factories.errors import EmptyCandidateSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


def pluck(candidates: Iterable[T], *, source: RandomSource | None = None) -> T:
    """Select a random value from ``candidates`` and return it.

    Handy to switch between equally valid variants in a fixture, e.g. the
    brand of a generated card. Raises :class:`EmptyCandidateSet` when there
    is nothing to choose from.
    """
    values = list(candidates)
    if not values:
        raise EmptyCandidateSet("pluck() needs at least one candidate")
    return resolve_source(source).choice(values)


def pluck_of(*values: T, source: RandomSource | None = None) -> T:
    return pluck(values, source=source)


def pluck_many(
    candidates: Iterable[T],
    count_range: IntRange | None = None,
    *,
    source: RandomSource | None = None,
) -> list[T]:
    """Select a random subset of ``candidates`` in random order.

    ``count_range`` bounds how many values are returned; by default anything
    from none to all of them. The count never exceeds the number of
    candidates, and a lower bound above that number is clamped down to it.
    Empty candidates always yield an empty list.
    """
    values = list(candidates)
    if not values:
        return []

    size = len(values)
    if count_range is None:
        count_range = IntRange(0, size)
    check_count_range(count_range)

    low = count_range.low
    if low > size:
        logger.debug("Clamping pluck_many lower bound %d to candidate count %d", low, size)
        low = size

    rng = resolve_source(source)
    end = random_int(low, size, source=rng)
    if end > count_range.high:
        end = count_range.high

    return rng.shuffled(values)[:end]


def pluck_many_of(
    *values: T,
    count_range: IntRange | None = None,
    source: RandomSource | None = None,
) -> list[T]:
    return pluck_many(values, count_range, source=source)
