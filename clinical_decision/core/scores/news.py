"""National Early Warning Score (temperature, heart rate, respiratory rate)."""

from __future__ import annotations

from types import MappingProxyType

from ..vitals import MeasurementType, RangeRule
from .registry import BandedScoringModel, ScoreBand, register


def _bands(*rows: tuple[int, int, int]) -> tuple[ScoreBand, ...]:
    return tuple(ScoreBand(RangeRule(low, high), score) for low, high, score in rows)


NEWS_MODEL_ID = "NEWS"


@register(NEWS_MODEL_ID)
class NewsScoringModel(BandedScoringModel):
    bands = MappingProxyType(
        {
            MeasurementType.TEMPERATURE: _bands(
                (31, 35, 3),
                (35, 36, 1),
                (36, 38, 0),
                (38, 39, 1),
                (39, 42, 2),
            ),
            MeasurementType.HEART_RATE: _bands(
                (25, 40, 3),
                (40, 50, 1),
                (50, 90, 0),
                (90, 110, 1),
                (110, 130, 2),
                (130, 220, 3),
            ),
            MeasurementType.RESPIRATORY_RATE: _bands(
                (3, 8, 3),
                (8, 11, 1),
                (11, 20, 0),
                (20, 24, 2),
                (24, 60, 3),
            ),
        }
    )
