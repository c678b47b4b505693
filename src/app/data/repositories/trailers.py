"""Trailer registration (TRN) lookups."""

from __future__ import annotations

import logging
from typing import Any

from src.app.data.remote import INVOCATION_BAD_DATA, INVOCATION_ERROR, build_envelope, decode_body, parse_payload
from src.app.errors import BadUpstreamDataError, TransientUpstreamError

from .base import FunctionRepository

logger = logging.getLogger(__name__)


class TrailerRepository(FunctionRepository):
    def get_trailer_registration(self, vin: str, make: str) -> dict[str, Any]:
        """Return ``{"Trn", "IsTrailer"}``; ``Trn`` is ``None`` when no registration exists."""

        envelope = build_envelope(
            "GET",
            f"/v1/trailers/{vin}",
            path_parameters={"proxy": "/v1/trailers"},
            query={"make": make},
        )
        try:
            payload = parse_payload(self.client.invoke(self.function_name, envelope))
            status = int(payload.get("statusCode") or 0)
            if status == 404:
                logger.debug("vinOrChassisWithMake not found %s", vin + make)
                return {"Trn": None, "IsTrailer": True}
            if status >= 400:
                raise TransientUpstreamError(f"{INVOCATION_ERROR} {status} {payload.get('body')}")
            registration = decode_body(payload)
            if registration is not None and not isinstance(registration, dict):
                raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {registration!r}.")
        except TransientUpstreamError:
            logger.error("Error on fetching vinOrChassisWithMake %s", vin + make)
            raise
        return {"Trn": (registration or {}).get("trn"), "IsTrailer": True}


__all__ = ["TrailerRepository"]
