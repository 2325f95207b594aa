"""Health check endpoint."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter

from ...core.scores import default_engine
from ..core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck() -> dict[str, str | List[str]]:
    return {
        "status": "ok",
        "service": settings.api_title,
        "models": default_engine().model_ids(),
    }
