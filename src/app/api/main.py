"""FastAPI application wiring for the certificate payload service."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.app.api.routes.certificates import router as certificates_router
from src.app.certificate.service import CertificateService
from src.app.config.settings import Settings, load_settings
from src.app.utils.logging_config import configure_logging


def create_app(settings: Settings | None = None, *, service: CertificateService | None = None) -> FastAPI:
    """Build the application; tests pass their own ``settings`` and ``service``."""

    settings = settings or load_settings()
    configure_logging(settings.logging.level, settings.logging.json_output)

    app = FastAPI(title="Certificate Payload Service")
    app.state.settings = settings
    app.state.certificate_service = service or CertificateService.from_settings(settings)

    @app.get("/health")
    def health() -> JSONResponse:
        """Simple liveness endpoint used by deployment health checks."""

        return JSONResponse({"status": "ok"})

    app.include_router(certificates_router)
    return app


app = create_app()


__all__ = ["app", "create_app"]
