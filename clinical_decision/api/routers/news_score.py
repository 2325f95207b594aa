"""API endpoint for NEWS score calculation."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.orchestrator import MeasurementInput, NewsScoreHandler
from ..deps import get_news_score_handler
from ..mappings import PROBLEM_MEDIA_TYPE, to_http_result
from ..schemas.news_score import NewsScoreRequest, NewsScoreResponse, ProblemDetails

router = APIRouter(tags=["scores"])

_PROBLEM = {"model": ProblemDetails, "content": {PROBLEM_MEDIA_TYPE: {}}}


@router.post(
    "/news-score",
    response_model=NewsScoreResponse,
    summary="Calculate NEWS score",
    description="Accepts TEMP, HR and RR measurements and returns the NEWS score.",
    responses={400: _PROBLEM, 404: _PROBLEM, 500: _PROBLEM},
)
def calculate_news_score(
    payload: NewsScoreRequest,
    handler: NewsScoreHandler = Depends(get_news_score_handler),
):
    raw = [MeasurementInput(item.type, item.value) for item in payload.measurements or []]
    result = handler.handle(raw)
    return to_http_result(result, lambda ok: NewsScoreResponse(score=ok.score))
