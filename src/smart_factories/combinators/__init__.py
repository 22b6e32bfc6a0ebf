"""Combinators composing the primitives into variant fixtures.

The objects listed in ``__all__`` form the supported public surface.
"""
from __future__ import annotations

from smart_factories.combinators.mutation import Transformation, apply_many, apply_one
from smart_factories.combinators.optional import maybe
from smart_factories.combinators.selection import pluck, pluck_many, pluck_many_of, pluck_of

__all__ = [
    "Transformation",
    "apply_many",
    "apply_one",
    "maybe",
    "pluck",
    "pluck_many",
    "pluck_many_of",
    "pluck_of",
]
