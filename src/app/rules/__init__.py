"""Certificate rules: defect bucketing, test-type predicates, record resolution."""

from __future__ import annotations

from .defects import classify, flatten_defects, format_defect, format_defect_welsh
from .tech_records import TechRecordResolver, select_candidate
from .test_types import (
    is_adr,
    is_basic_iva,
    is_hgv_trl_roadworthiness,
    is_iva,
    is_msva,
    is_valid_for_trn,
    is_welsh_certificate_available,
)

__all__ = [
    "classify",
    "flatten_defects",
    "format_defect",
    "format_defect_welsh",
    "TechRecordResolver",
    "select_candidate",
    "is_adr",
    "is_basic_iva",
    "is_hgv_trl_roadworthiness",
    "is_iva",
    "is_msva",
    "is_valid_for_trn",
    "is_welsh_certificate_available",
]
