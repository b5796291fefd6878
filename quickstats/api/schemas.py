from typing import List, Optional, Union

from pydantic import BaseModel, StrictBool, StrictInt, StrictStr

# Labels may be 0/1, true/false or class names
Label = Union[StrictBool, StrictInt, StrictStr]


class _StrictIn(BaseModel):
    model_config = {"extra": "forbid"}  # Forbid extra fields in input


# Input schema for /stats/summary
class SummaryIn(_StrictIn):
    values: List[float]  # Numbers to summarize
    precision: Optional[int] = None  # Round every statistic to this many decimals


# Output schema for /stats/summary
class SummaryOut(BaseModel):
    count: int
    sum: float
    mean: float
    variance: float  # Population variance
    stdev: float     # Population standard deviation


class ChangeIn(_StrictIn):
    old_value: float
    new_value: float


class ChangeOut(BaseModel):
    change: float  # Relative change, (new - old) / old


class CorrelationIn(_StrictIn):
    xs: List[float]
    ys: List[float]


class CorrelationOut(BaseModel):
    r: float


class ZScoreIn(_StrictIn):
    value: float
    values: List[float]


class ZScoreOut(BaseModel):
    z_score: float


class RoundIn(_StrictIn):
    value: float
    precision: int = 0


class RoundOut(BaseModel):
    value: float


# Input schema for /classification/metrics
class ClassificationIn(_StrictIn):
    predicted: List[Label]
    actual: List[Label]
    positive_label: Label = 1


class TallyOut(BaseModel):
    true_positive: int
    false_positive: int
    true_negative: int
    false_negative: int


# Output schema for /classification/metrics
class ClassificationOut(BaseModel):
    tally: TallyOut
    precision: float
    recall: float
    f1: float
    accuracy: float
