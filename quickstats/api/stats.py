import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, HTTPException

from quickstats.api.schemas import (
    ChangeIn,
    ChangeOut,
    CorrelationIn,
    CorrelationOut,
    RoundIn,
    RoundOut,
    SummaryIn,
    SummaryOut,
    ZScoreIn,
    ZScoreOut,
)
from quickstats.errors import QuickStatsError
from quickstats.observability.metrics import record_rejection
from quickstats.services import numeric

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["stats"])

T = TypeVar("T")


def run_guarded(operation: str, compute: Callable[[], T]) -> T:
    """Run a core computation, turning rejected input into a 400 response."""
    try:
        return compute()
    except QuickStatsError as exc:
        logger.warning("%s rejected input: %s", operation, exc)
        record_rejection(operation, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _summarize(values: list[float], precision: int | None) -> SummaryOut:
    stats = {
        "sum": numeric.sum(values),
        "mean": numeric.mean(values),
        "variance": numeric.variance(values),
        "stdev": numeric.stdev(values),
    }
    if precision is not None:
        stats = {name: numeric.round_to(v, precision) for name, v in stats.items()}
    return SummaryOut(count=len(values), **stats)


@router.post("/summary", response_model=SummaryOut)
async def summary(body: SummaryIn):
    """
    Sum, mean, population variance and standard deviation of 'values'.
    Responds with 400 Bad Request for an empty list.
    """
    return run_guarded("summary", lambda: _summarize(body.values, body.precision))


@router.post("/change", response_model=ChangeOut)
async def change(body: ChangeIn):
    """Relative change between two values; 400 when 'old_value' is 0."""
    return ChangeOut(change=run_guarded("change", lambda: numeric.change(body.old_value, body.new_value)))


@router.post("/correlation", response_model=CorrelationOut)
async def correlation(body: CorrelationIn):
    """Quick Pearson correlation of 'xs' and 'ys'."""
    return CorrelationOut(r=run_guarded("correlation", lambda: numeric.dirty_r(body.xs, body.ys)))


@router.post("/zscore", response_model=ZScoreOut)
async def zscore(body: ZScoreIn):
    return ZScoreOut(z_score=run_guarded("zscore", lambda: numeric.dirty_z_score(body.value, body.values)))


@router.post("/round", response_model=RoundOut)
async def round_value(body: RoundIn):
    """Round half away from zero to 'precision' decimal digits."""
    return RoundOut(value=run_guarded("round", lambda: numeric.round_to(body.value, body.precision)))
