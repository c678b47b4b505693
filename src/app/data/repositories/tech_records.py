"""Technical record search and fetch."""

from __future__ import annotations

import logging

from src.app.data.remote import build_envelope
from src.app.errors import CertificateGenerationError
from src.app.schemas.tech_record import SearchResult, TechnicalRecord

from .base import FunctionRepository, parse_model, parse_models

logger = logging.getLogger(__name__)


class TechRecordsRepository(FunctionRepository):
    """Soft reads: failures are logged and surface as empty/``None`` results."""

    def search(self, search_identifier: str) -> list[SearchResult]:
        envelope = build_envelope(
            "GET",
            f"/v3/technical-records/search/{search_identifier}?searchCriteria=systemNumber",
            path_parameters={"searchIdentifier": search_identifier},
        )
        try:
            return self.retry.run(
                lambda: parse_models(SearchResult, self.fetch(envelope) or []),
                description=f"Searching technical records {search_identifier}",
            )
        except CertificateGenerationError as exc:
            logger.error("Error searching technical records %s: %s", search_identifier, exc)
            return []

    def get(self, system_number: str, created_timestamp: str) -> TechnicalRecord | None:
        envelope = build_envelope(
            "GET",
            f"/v3/technical-records/{system_number}/{created_timestamp}",
            path_parameters={"systemNumber": system_number, "createdTimestamp": created_timestamp},
        )
        try:
            return self.retry.run(
                lambda: parse_model(TechnicalRecord, self.fetch(envelope)),
                description=f"Fetching technical record {system_number}",
            )
        except CertificateGenerationError as exc:
            logger.error("Error fetching technical record %s/%s: %s", system_number, created_timestamp, exc)
            return None


__all__ = ["TechRecordsRepository"]
