"""``DATA`` / ``FAIL_DATA`` sections for annual pass, fail and PRS certificates."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from src.app.certificate.base import FragmentGenerator
from src.app.data.repositories import DefectRepository, TestResultRepository, TrailerRepository
from src.app.rules.defects import classify, flatten_defects
from src.app.rules.tech_records import TechRecordResolver
from src.app.rules.test_types import is_valid_for_trn
from src.app.schemas.payload import CertificateKind
from src.app.schemas.test_result import TestOutcome, TestResult, VehicleType
from src.app.schemas.translations import FlatDefect
from src.app.utils.payload import compact
from src.app.utils.time import earliest_next_test_date, format_date

logger = logging.getLogger(__name__)

NBSP = "\u00a0"


def _next_test_date(test_result: TestResult) -> str | None:
    anniversary = test_result.testTypes.testAnniversaryDate
    if test_result.vehicleType in (VehicleType.HGV.value, VehicleType.TRL.value) and test_result.outcome in (
        TestOutcome.PASS.value,
        TestOutcome.PRS.value,
    ):
        return format_date(earliest_next_test_date(anniversary))
    return format_date(anniversary)


def build_section(
    test_result: TestResult,
    kind: CertificateKind,
    *,
    bilingual: bool = False,
    flat_defects: list[FlatDefect] | None = None,
) -> dict[str, Any]:
    """Fields common to both sections plus the defects classified for ``kind``."""

    test_type = test_result.testTypes
    section: dict[str, Any] = {
        "TestNumber": test_type.testNumber,
        "TestStationPNumber": test_result.testStationPNumber,
        "TestStationName": test_result.testStationName,
        "CurrentOdometer": compact(
            {"value": test_result.odometerReading, "unit": test_result.odometerReadingUnits}
        ),
        "IssuersName": test_result.testerName,
        "DateOfTheTest": format_date(test_result.testEndTimestamp),
        "CountryOfRegistrationCode": test_result.countryOfRegistration,
        "VehicleEuClassification": (test_result.euVehicleCategory or "").upper() or None,
        "RawVIN": test_result.vin,
        "RawVRM": test_result.vehicle_number,
        "ExpiryDate": format_date(test_type.testExpiryDate),
        "EarliestDateOfTheNextTest": _next_test_date(test_result),
        "SeatBeltTested": "Yes" if test_type.seatbeltInstallationCheckDate else "No",
        "SeatBeltPreviousCheckDate": format_date(test_type.lastSeatbeltInstallationCheckDate) or NBSP,
        "SeatBeltNumber": test_type.numberOfSeatbeltsFitted,
    }
    section.update(
        classify(
            test_type.defects,
            kind,
            test_result.vehicleType,
            test_result.outcome,
            bilingual,
            flat_defects,
        )
    )
    return section


class PassOrFailFragment(FragmentGenerator):
    sections = frozenset({"DATA", "FAIL_DATA"})

    def __init__(
        self,
        resolver: TechRecordResolver,
        defects: DefectRepository,
        test_results: TestResultRepository,
        trailers: TrailerRepository,
    ) -> None:
        super().__init__()
        self.resolver = resolver
        self.defects = defects
        self.test_results = test_results
        self.trailers = trailers

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        if self.kind not in (CertificateKind.PASS_DATA, CertificateKind.FAIL_DATA):
            return {}
        logger.debug(
            "Building pass/fail sections outcome=%s vehicle_type=%s bilingual=%s",
            test_result.outcome,
            test_result.vehicleType,
            self.bilingual,
        )

        flat_defects: list[FlatDefect] = []
        if self.bilingual:
            table = await asyncio.to_thread(self.defects.get_defect_translations)
            flat_defects = flatten_defects(table)

        odometer: dict[str, Any] = {}
        if test_result.vehicleType != VehicleType.TRL.value:
            odometer = await asyncio.to_thread(self.test_results.get_odometer_history, test_result.systemNumber)

        make_and_model = await asyncio.to_thread(self.resolver.make_and_model, test_result)

        trailer: dict[str, Any] = {}
        if is_valid_for_trn(test_result.vehicleType, make_and_model):
            trailer = await asyncio.to_thread(
                self.trailers.get_trailer_registration, test_result.vin, make_and_model["Make"]
            )

        extras = {**make_and_model, **odometer, **trailer}
        result: dict[str, Any] = {}
        if test_result.outcome != TestOutcome.FAIL.value:
            section = build_section(
                test_result, CertificateKind.PASS_DATA, bilingual=self.bilingual, flat_defects=flat_defects
            )
            result["DATA"] = compact({**section, **extras})
        if test_result.outcome != TestOutcome.PASS.value:
            section = build_section(
                test_result, CertificateKind.FAIL_DATA, bilingual=self.bilingual, flat_defects=flat_defects
            )
            result["FAIL_DATA"] = compact({**section, **extras})
        return result


__all__ = ["PassOrFailFragment", "build_section"]
