"""Assemble a certificate payload from concurrently generated fragments."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from src.app.errors import CertificateGenerationError
from src.app.schemas.payload import SECTION_KEYS, CertificateKind, CertificatePayload
from src.app.schemas.test_result import TestResult
from src.app.utils.payload import merge_fragments

from .base import FragmentGenerator

logger = logging.getLogger(__name__)


def _check_declarations(fragments: Sequence[FragmentGenerator]) -> None:
    claimed: dict[str, str] = {}
    for fragment in fragments:
        name = type(fragment).__name__
        unknown = fragment.sections - SECTION_KEYS
        if unknown:
            raise ValueError(f"{name} declares unknown payload sections: {sorted(unknown)}")
        for section in fragment.sections:
            if section in claimed:
                raise ValueError(f"Section '{section}' is declared by both {claimed[section]} and {name}")
            claimed[section] = name


class CertificatePayloadGenerator:
    """Run every fragment on the same test result and merge their output.

    Fragments run concurrently; the first fatal error raised by any of them
    fails the whole assembly.
    """

    def __init__(self, fragments: Sequence[FragmentGenerator]) -> None:
        _check_declarations(fragments)
        self.fragments = list(fragments)

    def initialise(self, kind: CertificateKind, bilingual: bool = False) -> None:
        for fragment in self.fragments:
            fragment.initialise(kind, bilingual)

    async def generate(
        self,
        test_result: TestResult,
        kind: CertificateKind,
        bilingual: bool = False,
    ) -> CertificatePayload:
        self.initialise(kind, bilingual)
        outputs: list[dict[str, Any]] = await asyncio.gather(
            *(fragment.generate(test_result.model_copy(deep=True)) for fragment in self.fragments)
        )

        for fragment, output in zip(self.fragments, outputs):
            undeclared = set(output) - fragment.sections
            if undeclared:
                raise CertificateGenerationError(
                    f"{type(fragment).__name__} emitted undeclared sections: {sorted(undeclared)}"
                )

        payload = CertificatePayload.model_validate(merge_fragments(outputs))
        logger.info(
            "Assembled certificate payload kind=%s sections=%s",
            kind.value,
            sorted(payload.model_fields_set),
            extra={"test_result_id": test_result.testResultId, "certificate_kind": kind.value},
        )
        return payload


__all__ = ["CertificatePayloadGenerator"]
