"""Models describing the certificate payload handed to the document renderer."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CertificateKind(str, Enum):
    """Certificate being generated; selects which sections are produced."""

    PASS_DATA = "PASS_DATA"
    FAIL_DATA = "FAIL_DATA"
    RWT_DATA = "RWT_DATA"
    ADR_DATA = "ADR_DATA"
    IVA_DATA = "IVA_DATA"
    MSVA_DATA = "MSVA_DATA"


class SignatureBlock(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ImageType: str = "png"
    ImageData: str | None = None


class ReissueBlock(BaseModel):
    model_config = ConfigDict(extra="forbid")

    Reason: str
    Issuer: str | None = None
    Date: str | None = None


class RoadworthinessData(BaseModel):
    """``RWT_DATA`` section for HGV/TRL roadworthiness certificates."""

    model_config = ConfigDict(extra="forbid")

    Dgvw: float
    Weight2: float
    VehicleNumber: str | None = None
    Vin: str | None = None
    IssuersName: str | None = None
    DateOfInspection: str | None = None
    TestStationPNumber: str | None = None
    DocumentNumber: str | None = None
    Date: str | None = None
    Defects: list[str] | None = None
    IsTrailer: bool


class Applicant(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    postTown: str | None = None
    postCode: str | None = None
    telephoneNumber: str | None = None
    emailAddress: str | None = None


class AdrData(BaseModel):
    """``ADR_DATA`` section; values come from the resolved technical record."""

    model_config = ConfigDict(extra="forbid")

    ChasisNumber: str | None = None
    RegistrationNumber: str | None = None
    ApplicantDetails: Applicant = Field(default_factory=Applicant)
    VehicleType: str | None = None
    PermittedDangerousGoods: list[str] | None = None
    BrakeEndurance: bool | None = None
    Weight: float | None = None
    TankManufacturer: str | None = None
    Tc2InitApprovalNo: str | None = None
    TankManufactureSerialNo: str | None = None
    YearOfManufacture: int | None = None
    TankCode: str | None = None
    SpecialProvisions: str | None = None
    TankStatement: str | None = None
    ExpiryDate: str | None = None
    AtfNameAtfPNumber: str | None = None
    Notes: str | None = None
    TestTypeDate: str | None = None
    Make: str | None = None
    Model: str | None = None


class AdditionalDefect(BaseModel):
    model_config = ConfigDict(extra="ignore")

    referenceNumber: str | None = None
    defectName: str
    defectNotes: str | None = None


class VehicleApprovalData(BaseModel):
    """Fields shared by the ``IVA_DATA`` and ``MSVA_DATA`` sections."""

    model_config = ConfigDict(extra="forbid")

    vin: str | None = None
    serialNumber: str | None = None
    make: str | None = None
    model: str | None = None
    date: str | None = None
    testerName: str | None = None
    station: str | None = None
    additionalDefects: list[AdditionalDefect] = Field(default_factory=list)
    requiredStandards: list[dict[str, Any]] | None = None


class IvaData(VehicleApprovalData):
    vehicleTrailerNrNo: str | None = None
    testCategoryClass: str | None = None
    testCategoryBasicNormal: str
    bodyType: str | None = None
    reapplicationDate: str | None = None


class MsvaData(VehicleApprovalData):
    vehicleZNumber: str | None = None
    type: str | None = None
    retestDate: str | None = None


class CertificatePayload(BaseModel):
    """Composed payload; only the known top-level sections are accepted."""

    model_config = ConfigDict(extra="forbid")

    Watermark: str = ""
    DATA: dict[str, Any] | None = None
    FAIL_DATA: dict[str, Any] | None = None
    RWT_DATA: dict[str, Any] | None = None
    ADR_DATA: dict[str, Any] | None = None
    IVA_DATA: dict[str, Any] | None = None
    MSVA_DATA: dict[str, Any] | None = None
    Signature: SignatureBlock = Field(default_factory=SignatureBlock)
    Reissue: ReissueBlock | None = None

    def to_document(self) -> dict[str, Any]:
        """Serialise for the renderer, omitting sections that were never set."""

        return self.model_dump(mode="json", exclude_unset=True)


SECTION_KEYS = frozenset(CertificatePayload.model_fields)


__all__ = [
    "CertificateKind",
    "SignatureBlock",
    "ReissueBlock",
    "RoadworthinessData",
    "Applicant",
    "AdrData",
    "AdditionalDefect",
    "VehicleApprovalData",
    "IvaData",
    "MsvaData",
    "CertificatePayload",
    "SECTION_KEYS",
]
