from __future__ import annotations

import asyncio
from typing import Any

from src.app.certificate.base import FragmentGenerator
from src.app.rules.tech_records import TechRecordResolver
from src.app.schemas.payload import AdrData, Applicant, CertificateKind
from src.app.schemas.test_result import TestResult

_APPLICANT = "techRecord_applicantDetails_"
_ADR = "techRecord_adrDetails_"
_TANK = "techRecord_adrDetails_tank_tankDetails_"


class AdrFragment(FragmentGenerator):
    """``ADR_DATA`` for dangerous-goods certificates."""

    sections = frozenset({"ADR_DATA"})

    def __init__(self, resolver: TechRecordResolver) -> None:
        super().__init__()
        self.resolver = resolver

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        if self.kind != CertificateKind.ADR_DATA:
            return {}

        record = await asyncio.to_thread(self.resolver.adr_details, test_result)
        make_and_model = await asyncio.to_thread(self.resolver.make_and_model, test_result)
        attr = record.attribute
        test_type = test_result.testTypes
        statement = attr(_TANK + "tankStatement_statement")

        data = AdrData(
            ChasisNumber=test_result.vin,
            RegistrationNumber=test_result.vrm,
            ApplicantDetails=Applicant(
                name=attr(_APPLICANT + "name"),
                address1=attr(_APPLICANT + "address1"),
                address2=attr(_APPLICANT + "address2"),
                # address3 repeats address1 on issued certificates
                address3=attr(_APPLICANT + "address1"),
                postTown=attr(_APPLICANT + "postTown"),
                postCode=attr(_APPLICANT + "postCode"),
                telephoneNumber=attr(_APPLICANT + "telephoneNumber"),
                emailAddress=attr(_APPLICANT + "emailAddress"),
            ),
            VehicleType=attr(_ADR + "vehicleDetails_type"),
            PermittedDangerousGoods=attr(_ADR + "permittedDangerousGoods"),
            BrakeEndurance=attr(_ADR + "brakeEndurance"),
            Weight=attr(_ADR + "weight"),
            TankManufacturer=attr(_TANK + "tankManufacturer") if statement else None,
            Tc2InitApprovalNo=attr(_TANK + "tc2Details_tc2IntermediateApprovalNo"),
            TankManufactureSerialNo=attr(_TANK + "tankManufacturerSerialNo"),
            YearOfManufacture=attr(_TANK + "yearOfManufacture"),
            TankCode=attr(_TANK + "tankCode"),
            SpecialProvisions=attr(_TANK + "specialProvisions"),
            TankStatement=statement,
            ExpiryDate=test_type.testExpiryDate,
            AtfNameAtfPNumber=f"{test_result.testStationName} {test_result.testStationPNumber}",
            Notes=test_type.additionalNotesRecorded,
            TestTypeDate=test_type.testTypeStartTimestamp,
            Make=make_and_model.get("Make"),
            Model=make_and_model.get("Model"),
        )
        return {"ADR_DATA": data.model_dump(exclude_none=True)}


__all__ = ["AdrFragment"]
