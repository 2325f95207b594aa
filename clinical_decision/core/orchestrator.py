"""Application-layer handler turning raw measurement pairs into a NEWS score."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import DomainError
from .measurement import Measurement
from .result import Err, Result
from .scores import NEWS_MODEL_ID, ScoringEngine, default_engine
from .vitals import parse_code

__all__ = ["MeasurementInput", "NewsScoreResult", "NewsScoreHandler", "NEWS_MODEL_ID"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasurementInput:
    type: Optional[str]
    value: int


@dataclass(frozen=True)
class NewsScoreResult:
    score: int


class NewsScoreHandler:
    """Parse, validate and score one request; the first error wins."""

    def __init__(self, engine: Optional[ScoringEngine] = None, *, model_id: str = NEWS_MODEL_ID) -> None:
        self.engine = engine or default_engine()
        self.model_id = model_id

    def handle(self, raw: Optional[Sequence[MeasurementInput]]) -> Result[NewsScoreResult, DomainError]:
        if not raw:
            return self._reject(
                DomainError.validation(
                    "MEASUREMENTS_REQUIRED",
                    "At least one measurement is required.",
                    field="measurements",
                )
            )

        measurements: List[Measurement] = []
        for index, item in enumerate(raw):
            parsed = parse_code(item.type, field=f"measurements[{index}].type")
            if parsed.is_err():
                return self._reject(parsed.error)
            created = Measurement.create(parsed.value, item.value, field=f"measurements[{index}].value")
            if created.is_err():
                return self._reject(created.error)
            measurements.append(created.value)

        outcome = self.engine.calculate(self.model_id, measurements)
        if outcome.is_err():
            return self._reject(outcome.error)
        return outcome.map(NewsScoreResult)

    @staticmethod
    def _reject(error: DomainError) -> Err[DomainError]:
        logger.warning("NEWS score request rejected: %s", error)
        return Err(error)
