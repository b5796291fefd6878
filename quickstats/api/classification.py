from fastapi import APIRouter

from quickstats.api.schemas import ClassificationIn, ClassificationOut, TallyOut
from quickstats.api.stats import run_guarded
from quickstats.services import classification

router = APIRouter(prefix="/classification", tags=["classification"])


def _score(body: ClassificationIn) -> ClassificationOut:
    tally = classification.count_values(body.predicted, body.actual, body.positive_label)
    return ClassificationOut(
        tally=TallyOut(**tally.as_dict()),
        precision=classification.precision(tally),
        recall=classification.recall(tally),
        f1=classification.f1(tally),
        accuracy=classification.accuracy(tally),
    )


@router.post("/metrics", response_model=ClassificationOut)
async def metrics(body: ClassificationIn):
    """
    Confusion tally plus precision, recall, F1 and accuracy of 'predicted'
    against 'actual'. Precision, recall and F1 fall back to 0.0 when their
    denominator is empty; an empty or mismatched pair of label lists is a
    400 Bad Request.
    """
    return run_guarded("classification", lambda: _score(body))
