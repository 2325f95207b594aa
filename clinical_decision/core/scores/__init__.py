"""Score package with registry and implementations."""

from .news import NEWS_MODEL_ID, NewsScoringModel
from .registry import (
    BandedScoringModel,
    DuplicateModelError,
    ScoreBand,
    ScoringEngine,
    ScoringModel,
    default_engine,
    register,
    registered_models,
)

__all__ = [
    "NEWS_MODEL_ID",
    "BandedScoringModel",
    "DuplicateModelError",
    "NewsScoringModel",
    "ScoreBand",
    "ScoringEngine",
    "ScoringModel",
    "default_engine",
    "register",
    "registered_models",
]
