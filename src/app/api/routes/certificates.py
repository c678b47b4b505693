"""Endpoints preparing certificate payloads for the document renderer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from src.app.certificate.service import CertificateService
from src.app.errors import CertificateGenerationError
from src.app.schemas.test_result import TestResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/certificates", tags=["certificates"])


def get_service(request: Request) -> CertificateService:
    return request.app.state.certificate_service


@router.post("/payload")
async def prepare_payload(test_result: TestResult, request: Request) -> dict[str, Any]:
    """Return the template name and assembled payload for ``test_result``."""

    service = get_service(request)
    try:
        return await service.prepare(test_result)
    except CertificateGenerationError as exc:
        logger.error(
            "Certificate generation failed status=%d error=%s",
            exc.status_code,
            exc.message,
            extra={"test_result_id": test_result.testResultId},
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


__all__ = ["router", "prepare_payload"]
