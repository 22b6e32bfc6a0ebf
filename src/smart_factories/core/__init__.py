"""Random source, ranges and the bounded primitives built on them."""
from __future__ import annotations

from smart_factories.core.expansion import expand
from smart_factories.core.primitives import (
    ALPHABET,
    DEFAULT_STRING_LENGTH,
    random_bool,
    random_int,
    random_int_in_range,
    random_long,
    random_long_in_range,
    random_string,
)
from smart_factories.core.random_source import RandomSource, default_source, resolve_source
from smart_factories.core.ranges import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN, IntRange

__all__ = [
    "ALPHABET",
    "DEFAULT_STRING_LENGTH",
    "INT_MAX",
    "INT_MIN",
    "IntRange",
    "LONG_MAX",
    "LONG_MIN",
    "RandomSource",
    "default_source",
    "expand",
    "random_bool",
    "random_int",
    "random_int_in_range",
    "random_long",
    "random_long_in_range",
    "random_string",
    "resolve_source",
]
