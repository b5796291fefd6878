"""Argument guards shared by the numeric helpers."""
from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real
from typing import Any

from quickstats.errors import InputTypeError

__all__: list[str] = [
    "throw_unless_num",
    "throw_unless_int",
    "numeric_values",
]


def throw_unless_num(value: Any, label: str = "value") -> Any:
    """
    Return ``value`` unchanged if it is a finite real number.
    Raises InputTypeError naming ``label`` otherwise (bools, NaN and inf included).
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InputTypeError(f"{label} must be a finite number, got {type(value).__name__} {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # integers beyond the double range
        finite = False
    if not finite:
        raise InputTypeError(f"{label} must be a finite number, got {value!r}")
    return value


def throw_unless_int(value: Any, label: str = "value") -> int:
    throw_unless_num(value, label)
    if int(value) != value:
        raise InputTypeError(f"{label} must be an integer, got {value!r}")
    return int(value)


def numeric_values(values: Iterable[Any], label: str = "values") -> list:
    """
    Materialize ``values`` as a list, guarding every element.
    Elements are labelled ``label[i]`` in error messages.
    """
    if isinstance(values, (str, bytes, dict)) or not isinstance(values, Iterable):
        raise InputTypeError(f"{label} must be a sequence of numbers, got {type(values).__name__}")
    return [throw_unless_num(v, f"{label}[{i}]") for i, v in enumerate(values)]
