"""Bounded random primitives: booleans, ints, longs and strings."""

from __future__ import annotations

import logging
import string

from smart_factories.core.random_source import RandomSource, resolve_source
from smart_factories.core.ranges import (
    INT_BITS,
    INT_MAX,
    INT_MIN,
    LONG_BITS,
    LONG_MAX,
    LONG_MIN,
    IntRange,
    check_count_range,
    check_domain,
)

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
DEFAULT_STRING_LENGTH = IntRange(1, 255)


def _draw_bounded(source: RandomSource, low: int, high: int, domain_max: int) -> int:
    """Draw from ``[low, high]`` assuming bounds were already validated.

    When ``high - low + 1`` does not fit the non-negative half of the working
    type (at most ``domain_max``), the draw falls back to
    ``low + below(domain_max)``. The result stays within the bounds but the
    top of the span is never produced, so the fallback is not uniform over
    ``[low, high]``.
    """
    if low == high:
        return low
    span = high - low + 1
    if span > domain_max:
        logger.debug("Span %d exceeds %d; drawing from the non-negative range instead", span, domain_max)
        return low + source.below(domain_max)
    return low + source.below(span)


def _draw_word(source: RandomSource, width: int, domain_max: int) -> int:
    """Draw a uniform two's-complement word covering the whole domain."""
    word = source.bits(width)
    return word - (1 << width) if word > domain_max else word


def random_bool(*, source: RandomSource | None = None) -> bool:
    return resolve_source(source).boolean()


def random_int(
    min_value: int | None = None,
    max_value: int | None = None,
    *,
    source: RandomSource | None = None,
) -> int:
    """Return an integer between ``min_value`` and ``max_value`` inclusive.

    Omitted bounds default to the 32-bit int domain; asking for the whole
    domain draws a full 32-bit word, which is uniform. Raises
    :class:`~smart_factories.errors.InvalidRange` when the bounds are
    inverted or do not fit the domain.
    """
    low = INT_MIN if min_value is None else min_value
    high = INT_MAX if max_value is None else max_value
    check_domain(low, high, INT_MIN, INT_MAX, "int")
    rng = resolve_source(source)
    if low == INT_MIN and high == INT_MAX:
        return _draw_word(rng, INT_BITS, INT_MAX)
    return _draw_bounded(rng, low, high, INT_MAX)


def random_int_in_range(value_range: IntRange, *, source: RandomSource | None = None) -> int:
    return random_int(value_range.low, value_range.high, source=source)


def random_long(
    min_value: int | None = None,
    max_value: int | None = None,
    *,
    source: RandomSource | None = None,
) -> int:
    """Return an integer between ``min_value`` and ``max_value`` inclusive.

    Same contract as :func:`random_int` over the 64-bit long domain. Asking
    for the whole domain draws a full 64-bit word, which is uniform.
    """
    low = LONG_MIN if min_value is None else min_value
    high = LONG_MAX if max_value is None else max_value
    check_domain(low, high, LONG_MIN, LONG_MAX, "long")
    rng = resolve_source(source)
    if low == LONG_MIN and high == LONG_MAX:
        return _draw_word(rng, LONG_BITS, LONG_MAX)
    return _draw_bounded(rng, low, high, LONG_MAX)


def random_long_in_range(value_range: IntRange, *, source: RandomSource | None = None) -> int:
    return random_long(value_range.low, value_range.high, source=source)


def random_string(
    length_range: IntRange = DEFAULT_STRING_LENGTH,
    *,
    source: RandomSource | None = None,
) -> str:
    """Create an alphanumeric string whose length falls within ``length_range``.

    The default range is 1-255 characters, so the result is never empty
    unless the caller passes a range starting at 0.
    """
    rng = resolve_source(source)
    length = random_int_in_range(check_count_range(length_range), source=rng)
    return "".join(rng.choices(ALPHABET, k=length))
