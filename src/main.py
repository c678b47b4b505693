"""FastAPI application entrypoint for the certificate payload service."""

from __future__ import annotations

from src.app.api.main import app, create_app

__all__ = ["app", "create_app"]
