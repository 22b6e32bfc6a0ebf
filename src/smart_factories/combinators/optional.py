"""Simulate optional fields."""

from __future__ import annotations

from typing import Optional, TypeVar

from smart_factories.core.primitives import random_bool
from smart_factories.core.random_source import RandomSource

T = TypeVar("T")


def maybe(value: T, *, source: Optional[RandomSource] = None) -> Optional[T]:
    """Return ``value`` or ``None`` with equal probability.

    Mimics data typed in by API consumers or people, where a customer might
    or might not have a name::

        request = CreateCustomerRequest(name=maybe(random_string()))
    """
    return value if random_bool(source=source) else None
