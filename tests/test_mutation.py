"""Tests for apply_one and apply_many."""
from __future__ import annotations

from dataclasses import dataclass, replace

import pytest
from hypothesis import given, strategies as st

from smart_factories.combinators.mutation import apply_many, apply_one
from smart_factories.core.primitives import random_int
from smart_factories.core.random_source import RandomSource
from smart_factories.core.ranges import IntRange
from smart_factories.errors import InvalidRange


@dataclass(frozen=True)
class Person:
    name: str | None = None
    cash_tag: str | None = None
    email: str | None = None


def _tagger(label: int):
    return lambda labels: labels + (label,)


def test_apply_one_runs_exactly_one_function() -> None:
    number = random_int(-1000, 1000)
    result = apply_one(number, lambda n: n + 1, lambda n: n + 10, lambda n: n + 100)
    assert result != number
    assert result in {number + 1, number + 10, number + 100}


def test_apply_one_sets_one_field() -> None:
    person = apply_one(
        Person(),
        lambda p: replace(p, name="Michael"),
        lambda p: replace(p, cash_tag="$michael"),
        lambda p: replace(p, email="michael@example.com"),
    )
    assert sum(value is not None for value in (person.name, person.cash_tag, person.email)) == 1


def test_apply_one_reaches_every_function() -> None:
    source = RandomSource(seed=4)
    seen = {apply_one(0, lambda n: n + 1, lambda n: n + 2, lambda n: n + 3, source=source) for _ in range(100)}
    assert seen == {1, 2, 3}


def test_apply_one_without_functions_returns_seed() -> None:
    seed = object()
    assert apply_one(seed) is seed


@given(count=st.integers(min_value=0, max_value=8), extra=st.integers(min_value=0, max_value=8))
def test_apply_many_applies_exactly_n(count: int, extra: int) -> None:
    transformations = [_tagger(label) for label in range(count + extra)]
    labels = apply_many((), IntRange.of(count), *transformations)
    assert len(labels) == count
    assert len(set(labels)) == count
    assert set(labels) <= set(range(count + extra))


def test_apply_many_folds_in_selection_order() -> None:
    calls: list[int] = []

    def recorder(label: int):
        def transform(value: str) -> str:
            calls.append(label)
            return value + str(label)

        return transform

    result = apply_many("", IntRange(1, 5), *(recorder(label) for label in range(5)))
    # each transformation consumed the previous output
    assert result == "".join(str(label) for label in calls)
    assert 1 <= len(calls) <= 5


def test_apply_many_returns_the_expected_number() -> None:
    number = random_int(-10_000, 10_000)
    invocations: dict[int, int] = {}

    def adder(key: int, amount: int):
        def transform(value: int) -> int:
            invocations[key] = amount
            return value + amount

        return transform

    functions = [adder(key, random_int(10, 1000)) for key in range(random_int(1, 200))]
    result = apply_many(number, IntRange(1, len(functions)), *functions)

    assert result != number
    assert result == number + sum(invocations.values())


def test_apply_many_zero_range_returns_seed_unchanged() -> None:
    seed = Person(name="unchanged")
    assert apply_many(seed, IntRange(0, 0), lambda p: replace(p, name="changed")) is seed


def test_apply_many_negative_range_rejected() -> None:
    with pytest.raises(InvalidRange):
        apply_many(0, IntRange(-1, 1), lambda n: n + 1)
