"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

from ...core.scores.news import NEWS_MODEL_ID


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    app_env: str = Field(default="development", alias="APP_ENV")
    api_title: str = Field(default="Clinical Decision Support API", alias="API_TITLE")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: List[str] = Field(default=["http://127.0.0.1", "http://localhost"], alias="CORS_ORIGINS")
    news_model_id: str = Field(default=NEWS_MODEL_ID, alias="NEWS_MODEL_ID")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
