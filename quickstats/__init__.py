"""quickstats: descriptive statistics and binary-classification scoring.

The package namespace exposes the public function set under its stable
names. The same functions are importable in snake_case from
``quickstats.services.numeric``, ``quickstats.services.classification``
and ``quickstats.services.guard``.
"""
from __future__ import annotations

from quickstats.services.classification import accuracy, count_values, f1, precision, recall
from quickstats.services.guard import throw_unless_num
from quickstats.services.numeric import (
    change,
    dirty_r,
    dirty_z_score,
    mean,
    round_to,
    stdev,
    sum,
    variance,
)

countValues = count_values
dirtyR = dirty_r
dirtyZScore = dirty_z_score
roundTo = round_to
throwUnlessNum = throw_unless_num

__all__: list[str] = [
    "accuracy",
    "change",
    "countValues",
    "dirtyR",
    "dirtyZScore",
    "f1",
    "mean",
    "precision",
    "recall",
    "roundTo",
    "stdev",
    "sum",
    "throwUnlessNum",
    "variance",
]

__version__ = "1.0.0"
