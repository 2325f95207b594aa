"""Translate domain errors into HTTP problem responses."""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.errors import DomainError, DomainErrorType
from ..core.result import Result
from .schemas.news_score import ProblemDetails

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROBLEM_MEDIA_TYPE = "application/problem+json"

_STATUS_BY_TYPE = {
    DomainErrorType.VALIDATION: 400,
    DomainErrorType.NOT_FOUND: 404,
    DomainErrorType.CONFLICT: 409,
    DomainErrorType.UNEXPECTED: 500,
}


def status_for(error: DomainError) -> int:
    return _STATUS_BY_TYPE.get(error.type, 500)


def to_problem(error: DomainError) -> JSONResponse:
    status = status_for(error)
    detail = error.message
    if error.type is DomainErrorType.UNEXPECTED:
        logger.error("Server-side scoring defect: %s", error, exc_info=error.exception)
        detail = "An unexpected error occurred."
    problem = ProblemDetails(
        title=error.code,
        status=status,
        detail=detail,
        code=error.code,
        field=error.field or None,
    )
    return JSONResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def to_http_result(result: Result[T, DomainError], map_ok: Callable[[T], BaseModel]):
    return result.match(ok=map_ok, err=to_problem)
