"""Custom exceptions for Smart Factories."""


class SmartFactoriesError(Exception):
    """Base exception for Smart Factories."""


class InvalidRange(SmartFactoriesError, ValueError):
    """Range bounds are inverted, negative where counts are expected, or outside the type domain."""


class EmptyCandidateSet(SmartFactoriesError, IndexError):
    """A single element was requested from an empty candidate set."""
