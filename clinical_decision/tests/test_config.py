import logging

import pytest

from clinical_decision.api.core.config import Settings, get_settings
from clinical_decision.api.deps import get_news_score_handler
from clinical_decision.api.mappings import status_for
from clinical_decision.core.errors import DomainError
from clinical_decision.core.orchestrator import MeasurementInput, NewsScoreHandler
from clinical_decision.core.scores import NEWS_MODEL_ID, NewsScoringModel


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("NEWS_MODEL_ID", "NEWS-ALT")
    monkeypatch.setenv("CORS_ORIGINS", '["https://ward.example.org"]')
    settings = Settings()
    assert settings.is_development is False
    assert settings.news_model_id == "NEWS-ALT"
    assert settings.cors_origins == ["https://ward.example.org"]


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for key in ("APP_ENV", "NEWS_MODEL_ID", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.is_development
    assert settings.news_model_id == NEWS_MODEL_ID == NewsScoringModel.model_id == NewsScoreHandler().model_id
    assert settings.log_level == "INFO"


@pytest.mark.parametrize(
    "error, status",
    [
        (DomainError.validation("C", "m"), 400),
        (DomainError.not_found("C", "m"), 404),
        (DomainError.conflict("C", "m"), 409),
        (DomainError.unexpected("C", "m"), 500),
    ],
)
def test_status_mapping(error, status):
    assert status_for(error) == status


def test_unregistered_model_id_warns_when_wiring_handler(monkeypatch: pytest.MonkeyPatch, caplog):
    monkeypatch.setenv("NEWS_MODEL_ID", "NEWS-ALT")
    get_settings.cache_clear()
    get_news_score_handler.cache_clear()
    try:
        with caplog.at_level(logging.WARNING, logger="clinical_decision.api.deps"):
            handler = get_news_score_handler()
        assert "'NEWS-ALT' is not registered" in caplog.text
        result = handler.handle(
            [MeasurementInput("TEMP", 37), MeasurementInput("HR", 60), MeasurementInput("RR", 15)]
        )
        assert result.error.code == "SCORING_MODEL_NOT_FOUND"
    finally:
        get_settings.cache_clear()
        get_news_score_handler.cache_clear()
