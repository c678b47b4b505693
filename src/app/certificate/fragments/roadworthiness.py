from __future__ import annotations

import asyncio
from typing import Any

from src.app.certificate.base import FragmentGenerator
from src.app.rules.defects import format_defect
from src.app.rules.tech_records import TechRecordResolver
from src.app.rules.test_types import is_hgv_trl_roadworthiness
from src.app.schemas.payload import CertificateKind, RoadworthinessData
from src.app.schemas.test_result import TestOutcome, TestResult
from src.app.utils.time import format_date


class RoadworthinessFragment(FragmentGenerator):
    """``RWT_DATA`` for HGV/TRL roadworthiness certificates."""

    sections = frozenset({"RWT_DATA"})

    def __init__(self, resolver: TechRecordResolver) -> None:
        super().__init__()
        self.resolver = resolver

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        if self.kind != CertificateKind.RWT_DATA or not is_hgv_trl_roadworthiness(test_result):
            return {}

        weights = await asyncio.to_thread(self.resolver.weight_details, test_result)
        test_type = test_result.testTypes
        defects = None
        if test_result.outcome == TestOutcome.FAIL.value:
            defects = [format_defect(defect) for defect in test_type.defects]

        inspected = format_date(test_type.testTypeStartTimestamp)
        data = RoadworthinessData(
            Dgvw=weights["dgvw"],
            Weight2=weights["weight2"],
            VehicleNumber=test_result.vehicle_number,
            Vin=test_result.vin,
            IssuersName=test_result.testerName,
            DateOfInspection=inspected,
            TestStationPNumber=test_result.testStationPNumber,
            DocumentNumber=test_type.certificateNumber,
            Date=inspected,
            Defects=defects,
            IsTrailer=test_result.is_trailer,
        )
        return {"RWT_DATA": data.model_dump(exclude_none=True)}


__all__ = ["RoadworthinessFragment"]
