"""Models for the defect translation table used by bilingual certificates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DeficiencyTranslation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ref: str | None = None
    deficiencyText: str | None = None
    deficiencyTextWelsh: str | None = None
    forVehicleType: list[str] = Field(default_factory=list)


class ItemTranslation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    itemNumber: int | None = None
    itemDescription: str | None = None
    itemDescriptionWelsh: str | None = None
    deficiencies: list[DeficiencyTranslation] = Field(default_factory=list)


class DefectTranslation(BaseModel):
    """Top-level inspection-manual entry with its nested items/deficiencies."""

    model_config = ConfigDict(extra="ignore")

    imNumber: int | None = None
    imDescription: str | None = None
    imDescriptionWelsh: str | None = None
    items: list[ItemTranslation] = Field(default_factory=list)


class FlatDefect(BaseModel):
    """Denormalised, language-parallel lookup row keyed by deficiency reference."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    imNumber: int | None = None
    imDescription: str | None = None
    imDescriptionWelsh: str | None = None
    itemNumber: int | None = None
    itemDescription: str | None = None
    itemDescriptionWelsh: str | None = None
    ref: str | None = None
    deficiencyText: str | None = None
    deficiencyTextWelsh: str | None = None
    forVehicleType: tuple[str, ...] = ()


__all__ = ["DeficiencyTranslation", "ItemTranslation", "DefectTranslation", "FlatDefect"]
