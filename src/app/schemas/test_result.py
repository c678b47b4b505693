"""Typed models for inspection test results consumed by certificate generation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VehicleType(str, Enum):
    """Vehicle classifications with certificate-specific behaviour."""

    PSV = "psv"
    HGV = "hgv"
    TRL = "trl"


class TestOutcome(str, Enum):
    """Overall result recorded against a test type."""

    __test__ = False

    PASS = "pass"
    FAIL = "fail"
    PRS = "prs"
    ABANDONED = "abandoned"


class TestStatus(str, Enum):
    """Lifecycle status of a test result."""

    __test__ = False

    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class AdditionalInformation(BaseModel):
    """Free-text notes and the structured location of a defect.

    ``location`` stays a plain mapping: its key order drives how the
    location phrases are rendered.
    """

    model_config = ConfigDict(extra="ignore")

    location: dict[str, Any] | None = None
    notes: str | None = None


class Defect(BaseModel):
    """Single defect recorded by the tester."""

    model_config = ConfigDict(extra="ignore")

    deficiencyCategory: str
    deficiencyRef: str
    itemDescription: str = ""
    deficiencyText: str | None = None
    imNumber: int | None = None
    imDescription: str | None = None
    itemNumber: int | None = None
    deficiencyId: str | None = None
    deficiencySubId: str | None = None
    prs: bool = False
    prohibitionIssued: bool | None = None
    additionalInformation: AdditionalInformation = Field(default_factory=AdditionalInformation)


class CustomDefect(BaseModel):
    """Free-form defect raised on IVA/MSVA inspections."""

    model_config = ConfigDict(extra="ignore")

    referenceNumber: str | None = None
    defectName: str
    defectNotes: str | None = None


class RequiredStandard(BaseModel):
    """Vehicle-approval standard failed during an IVA/MSVA inspection."""

    model_config = ConfigDict(extra="ignore")

    sectionNumber: str
    sectionDescription: str | None = None
    rsNumber: int | None = None
    requiredStandard: str | None = None
    refCalculation: str
    additionalInfo: bool = False
    inspectionTypes: list[str] = Field(default_factory=list)
    prs: bool = False
    additionalNotes: str | None = None


class TestType(BaseModel):
    """The test type whose outcome drives payload generation."""

    model_config = ConfigDict(extra="ignore")
    __test__ = False

    testCode: str | None = None
    testTypeId: str = ""
    testTypeName: str | None = None
    testTypeClassification: str | None = None
    testNumber: str | None = None
    certificateNumber: str | None = None
    testResult: str
    testExpiryDate: str | None = None
    testAnniversaryDate: str | None = None
    testTypeStartTimestamp: str | None = None
    testTypeEndTimestamp: str | None = None
    numberOfSeatbeltsFitted: int | None = None
    lastSeatbeltInstallationCheckDate: str | None = None
    seatbeltInstallationCheckDate: bool | None = None
    additionalNotesRecorded: str | None = None
    defects: list[Defect] = Field(default_factory=list)
    customDefects: list[CustomDefect] | None = None
    requiredStandards: list[RequiredStandard] | None = None


class BodyType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str | None = None
    description: str | None = None


class HistoricalTestResult(BaseModel):
    """Test result as returned by the test-results read path (many test types)."""

    model_config = ConfigDict(extra="ignore")

    testResultId: str | None = None
    systemNumber: str | None = None
    vin: str | None = None
    testStatus: str | None = None
    testEndTimestamp: str | None = None
    odometerReading: int | None = None
    odometerReadingUnits: str | None = None
    testTypes: list[TestType] = Field(default_factory=list)


class TestResult(BaseModel):
    """Completed inspection carrying exactly one test type."""

    model_config = ConfigDict(extra="ignore")
    __test__ = False

    testResultId: str
    systemNumber: str
    vin: str
    vrm: str | None = None
    trailerId: str | None = None
    vehicleType: str
    euVehicleCategory: str | None = None
    countryOfRegistration: str | None = None
    testStationName: str | None = None
    testStationPNumber: str | None = None
    testStationType: str | None = None
    testerName: str | None = None
    testerStaffId: str | None = None
    testerEmailAddress: str | None = None
    createdById: str | None = None
    createdByName: str | None = None
    createdAt: str | None = None
    testStartTimestamp: str | None = None
    testEndTimestamp: str | None = None
    testStatus: str | None = None
    odometerReading: int | None = None
    odometerReadingUnits: str | None = None
    make: str | None = None
    model: str | None = None
    bodyType: BodyType | None = None
    testHistory: list[HistoricalTestResult] | None = None
    testTypes: TestType

    @property
    def is_trailer(self) -> bool:
        return self.vehicleType == VehicleType.TRL.value

    @property
    def vehicle_number(self) -> str | None:
        """Trailer ID for trailers, registration mark for everything else."""

        return self.trailerId if self.is_trailer else self.vrm

    @property
    def outcome(self) -> str:
        return self.testTypes.testResult


__all__ = [
    "VehicleType",
    "TestOutcome",
    "TestStatus",
    "AdditionalInformation",
    "Defect",
    "CustomDefect",
    "RequiredStandard",
    "TestType",
    "BodyType",
    "HistoricalTestResult",
    "TestResult",
]
