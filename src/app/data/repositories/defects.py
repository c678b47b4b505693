"""Defect translation table used for bilingual certificates."""

from __future__ import annotations

import json
import logging

from src.app.data.remote import INVOCATION_BAD_DATA, build_envelope
from src.app.errors import BadUpstreamDataError
from src.app.schemas.translations import DefectTranslation

from .base import FunctionRepository, parse_models

logger = logging.getLogger(__name__)


class DefectRepository(FunctionRepository):
    def get_defect_translations(self) -> list[DefectTranslation]:
        """Return the inspection-manual tree; an empty list once retries run out."""

        envelope = build_envelope("GET", "/defects/")

        def _load() -> list[DefectTranslation]:
            body = self.fetch(envelope)
            if not body:
                raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {json.dumps(body)}.")
            return parse_models(DefectTranslation, body)

        return self.retry.run(_load, description="Retrieving welsh defect translations", fallback=[])


__all__ = ["DefectRepository"]
