"""Certificate kind selection and document template naming."""

from __future__ import annotations

from typing import Mapping

from src.app.errors import InvalidTestRecordError
from src.app.rules.test_types import is_adr, is_hgv_trl_roadworthiness, is_iva, is_msva
from src.app.schemas.payload import CertificateKind
from src.app.schemas.test_result import TestOutcome, TestResult

_FIXED_TEMPLATES = {
    CertificateKind.RWT_DATA: "rwt",
    CertificateKind.ADR_DATA: "adr_pass",
    CertificateKind.IVA_DATA: "iva_fail",
    CertificateKind.MSVA_DATA: "msva_fail",
}


def resolve_certificate_kind(test_result: TestResult) -> CertificateKind:
    test_type_id = test_result.testTypes.testTypeId
    if is_adr(test_type_id):
        return CertificateKind.ADR_DATA
    if is_hgv_trl_roadworthiness(test_result):
        return CertificateKind.RWT_DATA
    if is_iva(test_type_id):
        return CertificateKind.IVA_DATA
    if is_msva(test_type_id):
        return CertificateKind.MSVA_DATA
    if test_result.outcome == TestOutcome.FAIL.value:
        return CertificateKind.FAIL_DATA
    return CertificateKind.PASS_DATA


def template_key(kind: CertificateKind, vehicle_type: str, outcome: str, bilingual: bool = False) -> str:
    if kind in _FIXED_TEMPLATES:
        return _FIXED_TEMPLATES[kind]
    key = f"{vehicle_type}_{outcome}"
    return f"{key}_bilingual" if bilingual else key


def document_name(
    kind: CertificateKind,
    vehicle_type: str,
    outcome: str,
    bilingual: bool,
    names: Mapping[str, str],
) -> str:
    """Return the renderer template for a certificate.

    Raises:
        InvalidTestRecordError: no template is configured for the combination.
    """

    key = template_key(kind, vehicle_type, outcome, bilingual)
    try:
        return names[key]
    except KeyError as exc:
        raise InvalidTestRecordError(f"No certificate template for '{key}'") from exc


__all__ = ["resolve_certificate_kind", "template_key", "document_name"]
