"""Common FastAPI dependencies."""
from __future__ import annotations

import logging
from functools import lru_cache

from ..core.orchestrator import NewsScoreHandler
from ..core.scores import default_engine
from .core.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_news_score_handler() -> NewsScoreHandler:
    engine = default_engine()
    model_id = get_settings().news_model_id
    if engine.get(model_id) is None:
        logger.warning("Configured scoring model %r is not registered; requests will get 404", model_id)
    return NewsScoreHandler(engine, model_id=model_id)
