"""Contract shared by the fragment generators."""

from __future__ import annotations

from typing import Any, ClassVar

from src.app.schemas.payload import CertificateKind
from src.app.schemas.test_result import TestResult


class FragmentGenerator:
    """Produce a partial certificate payload for one or more named sections.

    ``sections`` declares the top-level payload keys a generator may emit;
    the orchestrator checks declarations are disjoint and rejects anything
    emitted outside them.  Generators never mutate the test result.
    """

    sections: ClassVar[frozenset[str]] = frozenset()

    def __init__(self) -> None:
        self.kind: CertificateKind | None = None
        self.bilingual = False

    def initialise(self, kind: CertificateKind, bilingual: bool = False) -> None:
        self.kind = kind
        self.bilingual = bilingual

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        raise NotImplementedError


__all__ = ["FragmentGenerator"]
