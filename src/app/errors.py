"""Exception hierarchy raised while assembling certificate payloads."""

from __future__ import annotations


class CertificateGenerationError(Exception):
    """Base error carrying the HTTP status code surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class NotFoundError(CertificateGenerationError):
    """No technical record (or vehicle data) exists for the requested vehicle."""

    status_code = 404


class BadUpstreamDataError(CertificateGenerationError):
    """A remote call answered with an empty or malformed body."""

    status_code = 400


class TransientUpstreamError(CertificateGenerationError):
    """A remote call failed in a way that may succeed when retried."""

    status_code = 500


class MissingVehicleDataError(CertificateGenerationError):
    """Essential vehicle data (e.g. axle weights) is absent from the record."""

    status_code = 500


class InvalidTestRecordError(CertificateGenerationError):
    """The incoming test record is not eligible for certificate generation."""

    status_code = 400


__all__ = [
    "CertificateGenerationError",
    "NotFoundError",
    "BadUpstreamDataError",
    "TransientUpstreamError",
    "MissingVehicleDataError",
    "InvalidTestRecordError",
]
