from __future__ import annotations

from typing import Any

from src.app.certificate.base import FragmentGenerator
from src.app.schemas.test_result import TestResult

NOT_VALID = "NOT VALID"


class WatermarkFragment(FragmentGenerator):
    """Marks every certificate outside production as not valid."""

    sections = frozenset({"Watermark"})

    def __init__(self, production: bool) -> None:
        super().__init__()
        self.production = production

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        return {"Watermark": "" if self.production else NOT_VALID}


__all__ = ["WatermarkFragment", "NOT_VALID"]
