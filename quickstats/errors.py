"""Exception types raised by the numeric core."""
from __future__ import annotations

__all__: list[str] = [
    "QuickStatsError",
    "InputTypeError",
    "DomainError",
]


class QuickStatsError(Exception):
    """Base class for every error raised by quickstats."""


class InputTypeError(QuickStatsError, TypeError):
    """An argument is not a finite real number (or not the expected type)."""


class DomainError(QuickStatsError, ValueError):
    """The operation is mathematically undefined for the given input.

    Examples: the mean of an empty sequence, a relative change from 0,
    correlation of sequences with different lengths.
    """
