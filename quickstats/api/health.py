import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from quickstats.errors import QuickStatsError
from quickstats.services import classification, numeric

logger = logging.getLogger(__name__)

router = APIRouter()

# (operation, thunk, expected) known-answer checks run once at startup
_KNOWN_ANSWERS = [
    ("mean", lambda: numeric.mean([1, 2, 3, 4]), 2.5),
    ("stdev", lambda: numeric.stdev([2, 4, 4, 4, 5, 5, 7, 9]), 2.0),
    ("round_to", lambda: numeric.round_to(2.345, 2), 2.35),
    ("dirty_r", lambda: numeric.dirty_r([1, 2, 3], [2, 4, 6]), 1.0),
    ("accuracy", lambda: classification.accuracy(classification.count_values([1, 0], [1, 1])), 0.5),
]


def core_self_check() -> bool:
    """Run the known-answer checks; the service is ready only if all pass."""
    for operation, compute, expected in _KNOWN_ANSWERS:
        try:
            result = compute()
        except QuickStatsError:
            logger.exception("self-check %s raised", operation)
            return False
        if abs(result - expected) > 1e-9:
            logger.error("self-check %s returned %r, expected %r", operation, result, expected)
            return False
    return True


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: 200 while the process is alive."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """
    Readiness probe.
    200 once startup finished and the numeric core passed its self-check,
    503 otherwise.
    """
    ready_flag = getattr(request.app.state, "ready_flag", None)
    if ready_flag and ready_flag():
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
