"""Certificate payload assembly."""

from .base import FragmentGenerator
from .documents import document_name, resolve_certificate_kind
from .generator import CertificatePayloadGenerator
from .service import CertificateService

__all__ = [
    "FragmentGenerator",
    "CertificatePayloadGenerator",
    "CertificateService",
    "document_name",
    "resolve_certificate_kind",
]
