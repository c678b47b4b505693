"""Defect classification and rendering for certificate payloads.

Raw defects recorded on a test type are rendered to display strings and
sorted into severity buckets (``DangerousDefects``, ``MajorDefects``,
``PRSDefects``, ``MinorDefects``, ``AdvisoryDefects``).  When a bilingual
certificate is requested and available, each bucket gets a ``...Welsh``
twin rendered from the defect translation table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from src.app.schemas.payload import CertificateKind
from src.app.schemas.test_result import Defect, TestOutcome
from src.app.schemas.translations import DefectTranslation, FlatDefect

from .constants import (
    AXLE_LABEL,
    AXLE_LABEL_WELSH,
    LOCATION_WELSH,
    ROW_LABEL,
    ROW_LABEL_WELSH,
    SEAT_LABEL,
    SEAT_LABEL_WELSH,
)
from .test_types import is_welsh_certificate_available

logger = logging.getLogger(__name__)

DANGEROUS = "DangerousDefects"
MAJOR = "MajorDefects"
PRS = "PRSDefects"
MINOR = "MinorDefects"
ADVISORY = "AdvisoryDefects"
BUCKETS = (DANGEROUS, MAJOR, PRS, MINOR, ADVISORY)
WELSH_SUFFIX = "Welsh"

_ENGLISH_LABELS = {"rowNumber": ROW_LABEL, "seatNumber": SEAT_LABEL, "axleNumber": AXLE_LABEL}
_WELSH_LABELS = {"rowNumber": ROW_LABEL_WELSH, "seatNumber": SEAT_LABEL_WELSH, "axleNumber": AXLE_LABEL_WELSH}


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def convert_location_welsh(location: str) -> str:
    """Translate a qualitative location; unknown values pass through unchanged."""

    return LOCATION_WELSH.get(location, location)


def _location_phrases(location: Mapping[str, Any], labels: Mapping[str, str], *, welsh: bool = False) -> str:
    # Keys are visited in insertion order; the closing "." follows the last
    # key even when its value is empty.
    text = ""
    keys = list(location)
    for index, key in enumerate(keys):
        value = location[key]
        if value:
            if key in labels:
                text += f" {labels[key]}: {value}."
            else:
                word = convert_location_welsh(str(value)) if welsh else str(value)
                text += f" {_upper_first(word)}"
        if index == len(keys) - 1:
            text += "."
    return text


def _render(reference: str, description: Any, deficiency_text: Any, defect: Defect, labels: Mapping[str, str], *, welsh: bool) -> str:
    text = f"{reference} {description}"
    if defect.deficiencyText:
        text += f" {deficiency_text}"
    info = defect.additionalInformation
    if info.location:
        text += _location_phrases(info.location, labels, welsh=welsh)
    if info.notes:
        text += f" {info.notes}"
    return text


def format_defect(defect: Defect) -> str:
    """Render ``"<ref> <item>[ <text>][ <location>][ <notes>]"``."""

    return _render(
        defect.deficiencyRef,
        defect.itemDescription,
        defect.deficiencyText,
        defect,
        _ENGLISH_LABELS,
        welsh=False,
    )


def filter_flat_defects(candidates: list[FlatDefect], vehicle_type: str) -> FlatDefect | None:
    """Pick the translation row for a reference, scoped by vehicle type when ambiguous."""

    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]
    scoped = [row for row in candidates if vehicle_type in row.forVehicleType]
    return scoped[0] if scoped else None


def format_defect_welsh(defect: Defect, vehicle_type: str, flat_defects: list[FlatDefect]) -> str | None:
    """Welsh rendering of ``defect``; ``None`` when no translation row applies."""

    matches = [row for row in flat_defects if row.ref == defect.deficiencyRef]
    row = filter_flat_defects(matches, vehicle_type)
    if row is None:
        logger.warning("No welsh translation for defect ref=%s vehicle_type=%s", defect.deficiencyRef, vehicle_type)
        return None

    text = _render(
        defect.deficiencyRef,
        row.itemDescriptionWelsh or "",
        row.deficiencyTextWelsh or "",
        defect,
        _WELSH_LABELS,
        welsh=True,
    )
    logger.debug("Welsh defect string generated: %s", text)
    return text


def flatten_defects(table: Iterable[DefectTranslation | Mapping[str, Any]]) -> list[FlatDefect]:
    """Denormalise the IM -> items -> deficiencies tree into one row per deficiency."""

    rows: list[FlatDefect] = []
    for entry in table:
        parent = entry if isinstance(entry, DefectTranslation) else DefectTranslation.model_validate(entry)
        for item in parent.items:
            for deficiency in item.deficiencies:
                rows.append(
                    FlatDefect(
                        imNumber=parent.imNumber,
                        imDescription=parent.imDescription,
                        imDescriptionWelsh=parent.imDescriptionWelsh,
                        itemNumber=item.itemNumber,
                        itemDescription=item.itemDescription,
                        itemDescriptionWelsh=item.itemDescriptionWelsh,
                        ref=deficiency.ref,
                        deficiencyText=deficiency.deficiencyText,
                        deficiencyTextWelsh=deficiency.deficiencyTextWelsh,
                        forVehicleType=tuple(deficiency.forVehicleType),
                    )
                )
    return rows


def classify(
    defects: Iterable[Defect],
    kind: CertificateKind,
    vehicle_type: str,
    outcome: str,
    bilingual: bool = False,
    flat_defects: list[FlatDefect] | None = None,
) -> dict[str, list[str]]:
    """Sort ``defects`` into severity buckets for a ``DATA``/``FAIL_DATA`` section.

    Dangerous and major defects move to the PRS bucket on the fail section
    when the outcome is PRS or the defect itself was rectified; otherwise
    they only appear on a failed test.  Minor and advisory defects always
    appear.  Empty buckets are omitted.
    """

    buckets: dict[str, list[str]] = {name: [] for name in BUCKETS}
    buckets.update({name + WELSH_SUFFIX: [] for name in BUCKETS})
    welsh = bilingual and is_welsh_certificate_available(vehicle_type, outcome)
    rows = flat_defects or []

    def _add(bucket: str, defect: Defect, *, translate: bool = True) -> None:
        buckets[bucket].append(format_defect(defect))
        if not welsh:
            return
        rendered = format_defect_welsh(defect, vehicle_type, rows) if translate else format_defect(defect)
        if rendered is not None:
            buckets[bucket + WELSH_SUFFIX].append(rendered)

    for defect in defects:
        category = defect.deficiencyCategory.lower()
        if category in ("dangerous", "major"):
            if (outcome == TestOutcome.PRS.value or defect.prs) and kind == CertificateKind.FAIL_DATA:
                _add(PRS, defect)
            elif outcome == TestOutcome.FAIL.value:
                _add(DANGEROUS if category == "dangerous" else MAJOR, defect)
        elif category == "minor":
            _add(MINOR, defect)
        elif category == "advisory":
            # Welsh twin reuses the English rendering for advisories
            _add(ADVISORY, defect, translate=False)

    return {name: values for name, values in buckets.items() if values}


__all__ = [
    "BUCKETS",
    "classify",
    "convert_location_welsh",
    "filter_flat_defects",
    "flatten_defects",
    "format_defect",
    "format_defect_welsh",
]
