"""Request-level processing: validate a test result and prepare its certificate payload."""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any

from src.app.config.settings import Settings
from src.app.data.remote import HttpFunctionClient, RemoteFunctionClient
from src.app.data.repositories import (
    DefectRepository,
    TechRecordsRepository,
    TestResultRepository,
    TestStationRepository,
    TrailerRepository,
)
from src.app.data.retry import RetryPolicy
from src.app.data.storage import FileSystemObjectStore, ObjectStore
from src.app.errors import InvalidTestRecordError
from src.app.rules.tech_records import TechRecordResolver
from src.app.rules.test_types import is_welsh_certificate_available
from src.app.schemas.test_result import TestResult, TestStatus

from .documents import document_name, resolve_certificate_kind
from .fragments import (
    AdrFragment,
    IvaFragment,
    MsvaFragment,
    PassOrFailFragment,
    RoadworthinessFragment,
    SignatureFragment,
    TestHistoryFragment,
    WatermarkFragment,
)
from .generator import CertificatePayloadGenerator

logger = logging.getLogger(__name__)

NOT_ELIGIBLE = "Not eligible for certificate generation."
INVALID_TEST_RESULT_ID = "Record does not have valid testResultId for certificate generation."


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except (TypeError, ValueError):
        return False
    return True


class CertificateService:
    """Wire repositories and fragments from ``Settings`` and prepare payloads."""

    def __init__(self, settings: Settings, client: RemoteFunctionClient, store: ObjectStore) -> None:
        self.settings = settings
        self.store = store
        retry = RetryPolicy(settings.retry.attempts)
        functions = settings.invoke.functions
        self.defects = DefectRepository(client, functions.defects, retry=retry)
        self.test_stations = TestStationRepository(client, functions.testStations, retry=retry)
        self.trailers = TrailerRepository(client, functions.trailerRegistration, retry=retry)
        self.test_results = TestResultRepository(client, functions.testResults, retry=retry)
        self.tech_records = TechRecordsRepository(client, functions.techRecords, retry=retry)
        self.resolver = TechRecordResolver(self.tech_records)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CertificateService":
        client = HttpFunctionClient(settings.invoke.endpoint, timeout=settings.invoke.timeout_seconds)
        store = FileSystemObjectStore(settings.signature.root, settings.branch)
        return cls(settings, client, store)

    def build_generator(self) -> CertificatePayloadGenerator:
        """A fresh orchestrator; fragments hold per-request kind/bilingual state."""

        return CertificatePayloadGenerator(
            [
                PassOrFailFragment(self.resolver, self.defects, self.test_results, self.trailers),
                RoadworthinessFragment(self.resolver),
                AdrFragment(self.resolver),
                IvaFragment(),
                MsvaFragment(),
                SignatureFragment(self.store, self.settings.signature.bucket),
                WatermarkFragment(self.settings.is_production),
                TestHistoryFragment(),
            ]
        )

    def validate(self, test_result: TestResult) -> None:
        if test_result.testStatus == TestStatus.CANCELLED.value:
            raise InvalidTestRecordError(NOT_ELIGIBLE)
        if not _is_uuid(test_result.testResultId):
            logger.error("%s %s", INVALID_TEST_RESULT_ID, test_result.testResultId)
            raise InvalidTestRecordError(f"Bad Test Record: {test_result.testResultId}")

    def is_bilingual(self, test_result: TestResult) -> bool:
        """Welsh output needs the switch on, an eligible pair and a station in Wales."""

        if not self.settings.welsh.enabled:
            return False
        if not is_welsh_certificate_available(test_result.vehicleType, test_result.outcome):
            return False
        return self.test_stations.is_in_wales(test_result.testStationPNumber)

    async def prepare(self, test_result: TestResult) -> dict[str, Any]:
        """Return the renderer request for ``test_result``.

        Raises:
            InvalidTestRecordError: cancelled or malformed test results.
            CertificateGenerationError: any fatal error raised while assembling.
        """

        self.validate(test_result)
        kind = resolve_certificate_kind(test_result)
        bilingual = await asyncio.to_thread(self.is_bilingual, test_result)
        name = document_name(
            kind,
            test_result.vehicleType,
            test_result.outcome,
            bilingual,
            self.settings.documents.names,
        )
        logger.info(
            "Preparing certificate kind=%s document=%s bilingual=%s",
            kind.value,
            name,
            bilingual,
            extra={"test_result_id": test_result.testResultId, "system_number": test_result.systemNumber},
        )
        payload = await self.build_generator().generate(test_result, kind, bilingual)
        return {
            "documentName": name,
            "documentDirectory": self.settings.documents.directory,
            "certificateKind": kind.value,
            "bilingual": bilingual,
            "payload": payload.to_document(),
        }


__all__ = ["CertificateService", "NOT_ELIGIBLE"]
