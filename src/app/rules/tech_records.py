"""Technical record resolution and the lookups derived from it."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.data.repositories.tech_records import TechRecordsRepository
from src.app.errors import MissingVehicleDataError, NotFoundError
from src.app.schemas.tech_record import SearchResult, TechnicalRecord
from src.app.schemas.test_result import TestResult, VehicleType

logger = logging.getLogger(__name__)

CURRENT = "current"
PROVISIONAL = "provisional"


@dataclass(slots=True, frozen=True)
class GroupedRecords:
    current: list[SearchResult]
    provisional: list[SearchResult]


def group_by_status(candidates: list[SearchResult]) -> GroupedRecords:
    """Split candidates into current and provisional, keeping their order."""

    current = [c for c in candidates if c.techRecord_statusCode == CURRENT]
    provisional = [c for c in candidates if c.techRecord_statusCode == PROVISIONAL]
    return GroupedRecords(current=current, provisional=provisional)


def select_candidate(candidates: list[SearchResult]) -> SearchResult:
    """Choose which record version to fetch.

    First current record; else the only provisional one; else the
    provisional record at index 1.
    """

    grouped = group_by_status(candidates)
    if grouped.current:
        return grouped.current[0]
    if len(grouped.provisional) == 1:
        return grouped.provisional[0]
    if len(grouped.provisional) > 1:
        return grouped.provisional[1]
    raise NotFoundError("Tech record Search returned nothing.")


class TechRecordResolver:
    """Resolve a vehicle's system number to its applicable technical record.

    Every call performs one search and one fetch; nothing is cached.
    """

    def __init__(self, repository: TechRecordsRepository) -> None:
        self.repository = repository

    def resolve(self, system_number: str) -> TechnicalRecord:
        candidates = self.repository.search(system_number)
        if not candidates:
            raise NotFoundError("Tech record Search returned nothing.")
        selected = select_candidate(candidates)
        record = self.repository.get(selected.systemNumber, selected.createdTimestamp)
        if record is None:
            raise NotFoundError(f"Unable to fetch technical record {selected.systemNumber}/{selected.createdTimestamp}")
        return record

    def make_and_model(self, test_result: TestResult) -> dict[str, str | None]:
        """``{Make, Model}``; chassis make/model for PSVs."""

        record = self.resolve(test_result.systemNumber)
        if record.techRecord_vehicleType == VehicleType.PSV.value:
            return {"Make": record.techRecord_chassisMake, "Model": record.techRecord_chassisModel}
        return {"Make": record.techRecord_make, "Model": record.techRecord_model}

    def weight_details(self, test_result: TestResult) -> dict[str, float]:
        """``{dgvw, weight2}`` for roadworthiness certificates.

        Raises:
            MissingVehicleDataError: a non-HGV record without axles.
        """

        record = self.resolve(test_result.systemNumber)
        details = {"dgvw": record.techRecord_grossDesignWeight or 0, "weight2": 0}
        if test_result.vehicleType == VehicleType.HGV.value:
            details["weight2"] = record.techRecord_trainDesignWeight or 0
        elif (record.techRecord_noOfAxles or -1) > 0:
            details["weight2"] = sum(axle.weights_designWeight or 0 for axle in record.techRecord_axles)
        else:
            logger.error("No axle weights for system_number=%s", test_result.systemNumber)
            raise MissingVehicleDataError("No axle weights for Roadworthiness test certificates!")
        return details

    def adr_details(self, test_result: TestResult) -> TechnicalRecord:
        return self.resolve(test_result.systemNumber)


__all__ = ["GroupedRecords", "TechRecordResolver", "group_by_status", "select_candidate"]
