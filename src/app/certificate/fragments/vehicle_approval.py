"""``IVA_DATA`` and ``MSVA_DATA`` sections for failed vehicle-approval inspections."""

from __future__ import annotations

import re
from typing import Any

from src.app.certificate.base import FragmentGenerator
from src.app.rules.constants import EMPTY_CUSTOM_DEFECTS, IVA_BASIC, IVA_NORMAL
from src.app.rules.test_types import is_basic_iva
from src.app.schemas.payload import AdditionalDefect, CertificateKind, IvaData, MsvaData
from src.app.schemas.test_result import CustomDefect, RequiredStandard, TestResult
from src.app.utils.time import SLASHED_DATE, format_date, vehicle_approval_retest_date

_DIGITS = re.compile(r"(\d+)")


def _natural_key(value: str) -> tuple[Any, ...]:
    return tuple(int(part) if part.isdigit() else part.lower() for part in _DIGITS.split(value))


def sort_required_standards(standards: list[RequiredStandard] | None) -> list[dict[str, Any]] | None:
    """Order standards naturally by ``refCalculation`` (``1.2`` before ``1.10``)."""

    if standards is None:
        return None
    ordered = sorted(standards, key=lambda standard: _natural_key(standard.refCalculation))
    return [standard.model_dump(exclude_none=True) for standard in ordered]


def additional_defects(custom_defects: list[CustomDefect] | None) -> list[AdditionalDefect]:
    """Custom defects, or a single placeholder entry when none were recorded."""

    if custom_defects:
        return [AdditionalDefect.model_validate(defect.model_dump()) for defect in custom_defects]
    return [AdditionalDefect(defectName=EMPTY_CUSTOM_DEFECTS, defectNotes="")]


class IvaFragment(FragmentGenerator):
    sections = frozenset({"IVA_DATA"})

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        if self.kind != CertificateKind.IVA_DATA:
            return {}

        test_type = test_result.testTypes
        data = IvaData(
            vin=test_result.vin,
            serialNumber=test_result.vehicle_number,
            vehicleTrailerNrNo=test_result.vehicle_number,
            testCategoryClass=test_result.euVehicleCategory,
            testCategoryBasicNormal=IVA_BASIC if is_basic_iva(test_type.testTypeId) else IVA_NORMAL,
            make=test_result.make,
            model=test_result.model,
            bodyType=test_result.bodyType.description if test_result.bodyType else None,
            date=format_date(test_type.testTypeStartTimestamp, SLASHED_DATE),
            testerName=test_result.testerName,
            reapplicationDate=vehicle_approval_retest_date(test_type.testTypeStartTimestamp),
            station=test_result.testStationName,
            additionalDefects=additional_defects(test_type.customDefects),
            requiredStandards=sort_required_standards(test_type.requiredStandards),
        )
        return {"IVA_DATA": data.model_dump(exclude_none=True)}


class MsvaFragment(FragmentGenerator):
    sections = frozenset({"MSVA_DATA"})

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        if self.kind != CertificateKind.MSVA_DATA:
            return {}

        test_type = test_result.testTypes
        data = MsvaData(
            vin=test_result.vin,
            serialNumber=test_result.vrm,
            vehicleZNumber=test_result.vrm,
            make=test_result.make,
            model=test_result.model,
            type=test_result.vehicleType,
            testerName=test_result.testerName,
            date=format_date(test_type.testTypeStartTimestamp, SLASHED_DATE),
            retestDate=vehicle_approval_retest_date(test_type.testTypeStartTimestamp),
            station=test_result.testStationName,
            additionalDefects=additional_defects(test_type.customDefects),
            requiredStandards=sort_required_standards(test_type.requiredStandards),
        )
        return {"MSVA_DATA": data.model_dump(exclude_none=True)}


__all__ = ["IvaFragment", "MsvaFragment", "additional_defects", "sort_required_standards"]
