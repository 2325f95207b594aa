"""Pydantic schemas for the NEWS score endpoint."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt

from ...core.vitals import SUPPORTED_CODES


class MeasurementInput(BaseModel):
    # Advertised as an enum; the core still rejects anything non-canonical.
    type: Optional[str] = Field(default=None, json_schema_extra={"enum": list(SUPPORTED_CODES)})
    value: StrictInt


class NewsScoreRequest(BaseModel):
    measurements: Optional[List[MeasurementInput]] = None


class NewsScoreResponse(BaseModel):
    score: int


class ProblemDetails(BaseModel):
    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: str
    field: Optional[str] = None
