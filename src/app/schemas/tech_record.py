"""Technical record models returned by the technical-records read paths."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """Summary of one technical record version (a resolution candidate)."""

    model_config = ConfigDict(extra="ignore")

    systemNumber: str
    createdTimestamp: str
    vin: str | None = None
    primaryVrm: str | None = None
    trailerId: str | None = None
    techRecord_vehicleType: str | None = None
    techRecord_make: str | None = None
    techRecord_model: str | None = None
    techRecord_chassisMake: str | None = None
    techRecord_chassisModel: str | None = None
    techRecord_statusCode: str | None = None


class Axle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    axleNumber: int | None = None
    weights_designWeight: float | None = None


class TechnicalRecord(BaseModel):
    """Full technical record in its flattened ``techRecord_*`` shape.

    Only the attributes read by the payload generators are typed; every
    other attribute (ADR tank details, applicant details, ...) is kept as an
    extra field and read through :meth:`attribute`.
    """

    model_config = ConfigDict(extra="allow")

    systemNumber: str | None = None
    createdTimestamp: str | None = None
    techRecord_vehicleType: str | None = None
    techRecord_statusCode: str | None = None
    techRecord_make: str | None = None
    techRecord_model: str | None = None
    techRecord_chassisMake: str | None = None
    techRecord_chassisModel: str | None = None
    techRecord_grossDesignWeight: float | None = None
    techRecord_trainDesignWeight: float | None = None
    techRecord_noOfAxles: int | None = None
    techRecord_axles: list[Axle] = Field(default_factory=list)

    def attribute(self, name: str) -> Any:
        """Return ``name`` whether it is a declared or an extra attribute."""

        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name)


__all__ = ["SearchResult", "Axle", "TechnicalRecord"]
