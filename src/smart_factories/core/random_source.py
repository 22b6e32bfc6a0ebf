"""Injectable random source shared by every generator."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from typing import Iterable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_default_lock = threading.Lock()
_default: RandomSource | None = None


@dataclass(eq=False)
class RandomSource:
    """
    Thin wrapper around random.Random to:
    - give every primitive an explicit source to draw from
    - support optional deterministic seeding for tests
    - keep compound draws (shuffles, strings) atomic across threads
    """

    seed: int | None = None
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def boolean(self) -> bool:
        """Return True or False with equal probability."""
        with self._lock:
            return self._rng.getrandbits(1) == 1

    def below(self, bound: int) -> int:
        """Return a random integer in [0, bound)."""
        if bound <= 0:
            raise ValueError("Upper bound must be positive")
        with self._lock:
            return self._rng.randrange(bound)

    def bits(self, width: int) -> int:
        """Return a non-negative integer with ``width`` random bits."""
        with self._lock:
            return self._rng.getrandbits(width)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        with self._lock:
            return seq[self._rng.randrange(len(seq))]

    def choices(self, seq: Sequence[T], k: int) -> list[T]:
        """Return ``k`` elements of ``seq`` drawn with replacement."""
        if not seq and k:
            raise IndexError("Cannot choose from an empty sequence")
        with self._lock:
            return self._rng.choices(seq, k=k)

    def shuffled(self, items: Iterable[T]) -> list[T]:
        """Return a shuffled copy of ``items``; the input is left untouched."""
        copy = list(items)
        with self._lock:
            self._rng.shuffle(copy)
        return copy


def default_source() -> RandomSource:
    """Return the process-wide source, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = RandomSource()
    return _default


def resolve_source(source: RandomSource | None) -> RandomSource:
    return source if source is not None else default_source()
