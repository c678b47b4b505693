"""Wire models for test results, technical records and certificate payloads."""

from .payload import (
    SECTION_KEYS,
    AdrData,
    CertificateKind,
    CertificatePayload,
    IvaData,
    MsvaData,
    ReissueBlock,
    RoadworthinessData,
    SignatureBlock,
)
from .tech_record import SearchResult, TechnicalRecord
from .test_result import (
    Defect,
    HistoricalTestResult,
    TestOutcome,
    TestResult,
    TestStatus,
    TestType,
    VehicleType,
)
from .translations import DefectTranslation, FlatDefect

__all__ = [
    "SECTION_KEYS",
    "AdrData",
    "CertificateKind",
    "CertificatePayload",
    "IvaData",
    "MsvaData",
    "ReissueBlock",
    "RoadworthinessData",
    "SignatureBlock",
    "SearchResult",
    "TechnicalRecord",
    "Defect",
    "HistoricalTestResult",
    "TestOutcome",
    "TestResult",
    "TestStatus",
    "TestType",
    "VehicleType",
    "DefectTranslation",
    "FlatDefect",
]
