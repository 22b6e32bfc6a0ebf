"""Smart Factories package."""

from importlib.metadata import PackageNotFoundError, version

from smart_factories.combinators import (
    apply_many,
    apply_one,
    maybe,
    pluck,
    pluck_many,
    pluck_many_of,
    pluck_of,
)
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
from smart_factories.core.random_source import RandomSource, default_source
from smart_factories.core.expansion import expand
from smart_factories.core.ranges import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN, IntRange
from smart_factories.errors import EmptyCandidateSet, InvalidRange, SmartFactoriesError

__all__ = [
    "ALPHABET",
    "DEFAULT_STRING_LENGTH",
    "EmptyCandidateSet",
    "INT_MAX",
    "INT_MIN",
    "IntRange",
    "InvalidRange",
    "LONG_MAX",
    "LONG_MIN",
    "RandomSource",
    "SmartFactoriesError",
    "__version__",
    "apply_many",
    "apply_one",
    "default_source",
    "expand",
    "maybe",
    "pluck",
    "pluck_many",
    "pluck_many_of",
    "pluck_of",
    "random_bool",
    "random_int",
    "random_int_in_range",
    "random_long",
    "random_long_in_range",
    "random_string",
]

try:
    __version__ = version("smart-factories")
except PackageNotFoundError:  # pragma: no cover - happens only from source checkout
    __version__ = "0.0.0-dev"
