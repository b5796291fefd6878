"""Binary-classification scoring from a confusion tally."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Hashable, Sequence

from quickstats.errors import DomainError, InputTypeError

__all__: list[str] = [
    "ConfusionTally",
    "count_values",
    "precision",
    "recall",
    "f1",
    "accuracy",
]


@dataclass(frozen=True, slots=True)
class ConfusionTally:
    true_positive: int
    false_positive: int
    true_negative: int
    false_negative: int

    def __post_init__(self) -> None:
        for name, count in asdict(self).items():
            if isinstance(count, bool) or not isinstance(count, int):
                raise InputTypeError(f"{name} must be an integer count, got {count!r}")
            if count < 0:
                raise DomainError(f"{name} must not be negative, got {count}")

    @property
    def total(self) -> int:
        return self.true_positive + self.false_positive + self.true_negative + self.false_negative

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _safe_div(num: float, den: float) -> float:
    # 0.0 is the sentinel for "no items of this class"
    return (num / den) if den else 0.0


def _check_tally(tally: Any) -> ConfusionTally:
    if not isinstance(tally, ConfusionTally):
        raise InputTypeError(f"tally must be a ConfusionTally, got {type(tally).__name__}")
    return tally


def count_values(
    predicted: Sequence[Hashable],
    actual: Sequence[Hashable],
    positive_label: Hashable = 1,
) -> ConfusionTally:
    """
    Compare predicted and actual labels pairwise against ``positive_label``.
    Raises DomainError if the two sequences differ in length.
    """
    predicted, actual = list(predicted), list(actual)
    if len(predicted) != len(actual):
        raise DomainError(
            f"'predicted' and 'actual' must have the same length, got {len(predicted)} and {len(actual)}"
        )
    tp = fp = tn = fn = 0
    for guess, truth in zip(predicted, actual):
        match (bool(guess == positive_label), bool(truth == positive_label)):
            case (True, True):
                tp += 1
            case (True, False):
                fp += 1
            case (False, True):
                fn += 1
            case (False, False):
                tn += 1
    return ConfusionTally(true_positive=tp, false_positive=fp, true_negative=tn, false_negative=fn)


def precision(tally: ConfusionTally) -> float:
    """Fraction of predicted positives that are truly positive; 0.0 when nothing was predicted positive."""
    tally = _check_tally(tally)
    return _safe_div(tally.true_positive, tally.true_positive + tally.false_positive)


def recall(tally: ConfusionTally) -> float:
    """Fraction of actual positives predicted positive; 0.0 when there are none."""
    tally = _check_tally(tally)
    return _safe_div(tally.true_positive, tally.true_positive + tally.false_negative)


def f1(tally: ConfusionTally) -> float:
    """Harmonic mean of precision and recall; 0.0 when both are 0."""
    p, r = precision(tally), recall(tally)
    return _safe_div(2 * p * r, p + r)


def accuracy(tally: ConfusionTally) -> float:
    """
    Fraction of all observations classified correctly.
    Raises DomainError if the tally is empty.
    """
    tally = _check_tally(tally)
    if tally.total == 0:
        raise DomainError("accuracy is undefined for an empty tally")
    return (tally.true_positive + tally.true_negative) / tally.total
