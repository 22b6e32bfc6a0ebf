"""Inclusive ranges and the integer domains generators work within."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, TypeVar

from smart_factories.errors import InvalidRange

if TYPE_CHECKING:
    from smart_factories.core.random_source import RandomSource

T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
INT_BITS = 32
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
LONG_BITS = 64


@dataclass(frozen=True)
class IntRange:
    """Inclusive ``[low, high]`` range; both endpoints are selectable."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise InvalidRange(
                f"The minimum value ({self.low}) cannot be higher than the maximum value ({self.high})."
            )

    @classmethod
    def of(cls, value: int) -> IntRange:
        return cls(value, value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high

    def gen(self, generator: Callable[[], T], *, source: RandomSource | None = None) -> list[T]:
        """Create between ``low`` and ``high`` values with ``generator``.

        Example::

            # between 5 and 10 customers
            IntRange(5, 10).gen(new_customer)
        """
        from smart_factories.core.expansion import expand

        return expand(self, generator, source=source)


def check_domain(low: int, high: int, domain_min: int, domain_max: int, type_name: str) -> None:
    """Fail fast on inverted bounds or bounds the working type cannot hold."""
    if low > high:
        raise InvalidRange(f"The minimum value ({low}) cannot be higher than the maximum value ({high}).")
    if low < domain_min or high > domain_max:
        raise InvalidRange(
            f"Bounds [{low}, {high}] do not fit the {type_name} domain [{domain_min}, {domain_max}]."
        )


def check_count_range(count_range: IntRange) -> IntRange:
    """Counts may start at zero but never go negative."""
    if count_range.low < 0:
        raise InvalidRange(f"Count range {count_range.low}..{count_range.high} cannot be negative.")
    return count_range
