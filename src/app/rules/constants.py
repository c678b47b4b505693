"""Fixed allow-lists and lookup tables for certificate rules."""

from __future__ import annotations

from src.app.schemas.test_result import TestOutcome, VehicleType

AVAILABLE_WELSH = frozenset(
    f"{vehicle.value}_{outcome.value}"
    for vehicle in (VehicleType.HGV, VehicleType.TRL, VehicleType.PSV)
    for outcome in (TestOutcome.PASS, TestOutcome.FAIL, TestOutcome.PRS)
)

HGV_TRL_ROADWORTHINESS_TEST_TYPE_IDS = frozenset({"62", "63", "91", "101", "122"})
ADR_TEST_TYPE_IDS = frozenset({"50", "59", "60"})
BASIC_IVA_TEST_TYPE_IDS = frozenset({"125", "129", "154", "184", "186", "190", "196"})
IVA30_TEST_TYPE_IDS = frozenset(
    ["125", "126", "128", "129", "130", "131", "132"]
    + [str(n) for n in range(142, 155)]
    + [str(n) for n in range(184, 209)]
)
MSVA30_TEST_TYPE_IDS = frozenset({"133", "134", "135", "136", "138", "139", "140", "141"})

IVA_BASIC = "Basic"
IVA_NORMAL = "Normal"
EMPTY_CUSTOM_DEFECTS = "N/A"

ROW_LABEL = "Rows"
SEAT_LABEL = "Seats"
AXLE_LABEL = "Axles"
ROW_LABEL_WELSH = "Rhesi"
SEAT_LABEL_WELSH = "Seddi"
AXLE_LABEL_WELSH = "Echelau"

LOCATION_WELSH = {
    "front": "blaen",
    "rear": "cefn",
    "upper": "uchaf",
    "lower": "isaf",
    "nearside": "ochr mewnol",
    "offside": "ochr allanol",
    "centre": "canol",
    "inner": "mewnol",
    "outer": "allanol",
}


__all__ = [
    "AVAILABLE_WELSH",
    "HGV_TRL_ROADWORTHINESS_TEST_TYPE_IDS",
    "ADR_TEST_TYPE_IDS",
    "BASIC_IVA_TEST_TYPE_IDS",
    "IVA30_TEST_TYPE_IDS",
    "MSVA30_TEST_TYPE_IDS",
    "IVA_BASIC",
    "IVA_NORMAL",
    "EMPTY_CUSTOM_DEFECTS",
    "ROW_LABEL",
    "SEAT_LABEL",
    "AXLE_LABEL",
    "ROW_LABEL_WELSH",
    "SEAT_LABEL_WELSH",
    "AXLE_LABEL_WELSH",
    "LOCATION_WELSH",
]
