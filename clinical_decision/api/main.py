"""FastAPI application bootstrap."""
from __future__ import annotations

from fastapi import FastAPI

from .core.config import settings
from .core.logging import register_middleware, setup_logging
from .core.security import enable_cors, enforce_https
from .routers import health, news_score

setup_logging(settings.log_level.upper())

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    docs_url="/docs" if settings.is_development else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.is_development else None,
)

register_middleware(app)
enable_cors(app, settings)
enforce_https(app, settings)

app.include_router(health.router)
app.include_router(news_score.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": settings.api_title, "health": "/health"}
