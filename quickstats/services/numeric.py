"""Numeric statistics helpers.

Descriptive statistics over plain sequences of numbers. Every function
guards its numeric arguments with ``throw_unless_num`` and raises
``DomainError`` where the result is mathematically undefined or does not
fit in a double.
"""
from __future__ import annotations

import builtins
import math
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, Iterator

from quickstats.errors import DomainError
from quickstats.services.guard import numeric_values, throw_unless_int, throw_unless_num

__all__: list[str] = [
    "sum",
    "mean",
    "variance",
    "stdev",
    "round_to",
    "change",
    "dirty_r",
    "dirty_z_score",
]

# Wide enough for any float quantized at any exponent it can carry.
_ROUNDING = Context(prec=800, rounding=ROUND_HALF_UP)


@contextmanager
def _double_range(operation: str) -> Iterator[None]:
    """Report arithmetic overflow inside the block as a DomainError."""
    try:
        yield
    except OverflowError as exc:
        raise DomainError(f"{operation} overflows double precision") from exc


def _finite(result, operation: str):
    # inf and nan come out of float arithmetic silently; huge ints raise here
    if not math.isfinite(result):
        raise DomainError(f"{operation} overflows double precision")
    return result


def _non_empty(values: Iterable[float], label: str = "values") -> list:
    vals = numeric_values(values, label)
    if not vals:
        raise DomainError(f"'{label}' must not be empty")
    return vals


def sum(values: Iterable[float]) -> float:
    """Arithmetic total of ``values``. An empty sequence sums to 0."""
    vals = numeric_values(values)
    with _double_range("sum"):
        return _finite(builtins.sum(vals), "sum")


def mean(values: Iterable[float]) -> float:
    """
    Arithmetic mean of ``values``.
    Raises DomainError if input is empty.
    """
    vals = _non_empty(values)
    with _double_range("mean"):
        return _finite(builtins.sum(vals) / len(vals), "mean")


def variance(values: Iterable[float]) -> float:
    """
    Population variance (divides by N, not N - 1).
    Raises DomainError if input is empty.
    """
    vals = _non_empty(values)
    with _double_range("variance"):
        avg = _finite(builtins.sum(vals) / len(vals), "variance")
        squares = builtins.sum((v - avg) * (v - avg) for v in vals)
        return _finite(squares / len(vals), "variance")


def stdev(values: Iterable[float]) -> float:
    """Population standard deviation, ``sqrt(variance(values))``."""
    return math.sqrt(variance(values))


def round_to(value: float, precision: int = 0) -> float:
    """
    Round ``value`` to ``precision`` decimal digits, half away from zero.

    Rounding works on the shortest decimal repr of the float, so
    ``round_to(2.345, 2) == 2.35`` even though 2.345 is stored as
    2.34499999... Negative ``precision`` rounds left of the decimal
    point: ``round_to(1250, -2) == 1300.0``.
    """
    throw_unless_num(value, "value")
    digits = throw_unless_int(precision, "precision")
    exact = Decimal(repr(float(value)))
    if exact.as_tuple().exponent >= -digits:
        # already representable at the requested precision
        return float(exact) + 0.0
    if -digits > exact.adjusted() + 1:
        # the rounding unit is more than ten times |value|
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    rounded = float(exact.quantize(quantum, context=_ROUNDING)) + 0.0
    return _finite(rounded, "round_to")


def change(old_value: float, new_value: float) -> float:
    """
    Relative change from ``old_value`` to ``new_value``: (new - old) / old.
    Raises DomainError if ``old_value`` is 0.
    """
    throw_unless_num(old_value, "old_value")
    throw_unless_num(new_value, "new_value")
    if old_value == 0:
        raise DomainError("relative change from 'old_value' 0 is undefined")
    with _double_range("change"):
        return _finite((new_value - old_value) / old_value, "change")


def dirty_r(xs: Iterable[float], ys: Iterable[float]) -> float:
    """
    Pearson correlation coefficient from raw sums in a single pass.

    Uses n, sum(x), sum(y), sum(x*y), sum(x**2) and sum(y**2) directly
    instead of deviations from the mean, so large-magnitude input loses
    precision to cancellation. The result is returned as computed and can
    fall slightly outside [-1, 1] on ill-conditioned input.

    Raises DomainError on length mismatch, fewer than two points,
    constant input, or sums that overflow a double.
    """
    x_vals = numeric_values(xs, "xs")
    y_vals = numeric_values(ys, "ys")
    n = len(x_vals)
    if n != len(y_vals):
        raise DomainError(f"'xs' and 'ys' must have the same length, got {n} and {len(y_vals)}")
    if n < 2:
        raise DomainError(f"correlation needs at least 2 points, got {n}")
    for label, vals in (("xs", x_vals), ("ys", y_vals)):
        if min(vals) == max(vals):
            raise DomainError(f"correlation is undefined for constant input '{label}'")

    with _double_range("dirty_r"):
        sum_x = sum_y = sum_xy = sum_xx = sum_yy = 0.0
        for x, y in zip(x_vals, y_vals):
            sum_x += x
            sum_y += y
            sum_xy += x * y
            sum_xx += x * x
            sum_yy += y * y

        x_spread = _finite(n * sum_xx - sum_x * sum_x, "dirty_r")
        y_spread = _finite(n * sum_yy - sum_y * sum_y, "dirty_r")
        if x_spread <= 0 or y_spread <= 0:
            raise DomainError("correlation is undefined for constant input")
        covariance = _finite(n * sum_xy - sum_x * sum_y, "dirty_r")
        return _finite(covariance / (math.sqrt(x_spread) * math.sqrt(y_spread)), "dirty_r")


def dirty_z_score(value: float, values: Iterable[float]) -> float:
    """
    Number of standard deviations ``value`` lies from the mean of ``values``.

    The variance comes from the direct formula ``mean(x**2) - mean(x)**2``.
    Raises DomainError if ``values`` is empty or has zero variance.
    """
    throw_unless_num(value, "value")
    vals = _non_empty(values)
    if min(vals) == max(vals):
        raise DomainError("z-score is undefined for a zero-variance sequence")
    n = len(vals)
    with _double_range("dirty_z_score"):
        avg = _finite(builtins.sum(vals) / n, "dirty_z_score")
        var = _finite(builtins.sum(v * v for v in vals) / n - avg * avg, "dirty_z_score")
        if var <= 0:
            raise DomainError("z-score is undefined for a zero-variance sequence")
        return _finite((value - avg) / math.sqrt(var), "dirty_z_score")
