"""Transport security: CORS and HTTPS redirection."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from .config import Settings


def enable_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


def enforce_https(app: FastAPI, settings: Settings) -> None:
    """Redirect plain HTTP to HTTPS outside local development."""

    if not settings.is_development:
        app.add_middleware(HTTPSRedirectMiddleware)
