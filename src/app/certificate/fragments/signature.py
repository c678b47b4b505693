from __future__ import annotations

import asyncio
import logging
from typing import Any

from src.app.certificate.base import FragmentGenerator
from src.app.data.storage import ObjectStore
from src.app.schemas.payload import SignatureBlock
from src.app.schemas.test_result import TestResult

logger = logging.getLogger(__name__)


def signature_bucket(bucket: str) -> str:
    return f"cvs-signature-{bucket}"


class SignatureFragment(FragmentGenerator):
    """Signature image of the staff member who created the test result."""

    sections = frozenset({"Signature"})

    def __init__(self, store: ObjectStore, bucket: str) -> None:
        super().__init__()
        self.store = store
        self.bucket = bucket

    def fetch_signature(self, staff_id: str | None) -> str | None:
        """Base64 signature for ``staff_id``; ``None`` when it cannot be read."""

        if not staff_id:
            logger.error("Unable to fetch signature: no staff id on test result")
            return None
        try:
            raw = self.store.download(signature_bucket(self.bucket), f"{staff_id}.base64")
            return raw.decode("utf-8")
        except Exception as exc:  # noqa: BLE001 - any storage failure leaves the image blank
            logger.error("Unable to fetch signature for staff id %s. %s", staff_id, exc)
            return None

    async def generate(self, test_result: TestResult) -> dict[str, Any]:
        staff_id = test_result.createdById or test_result.testerStaffId
        image = await asyncio.to_thread(self.fetch_signature, staff_id)
        return {"Signature": SignatureBlock(ImageType="png", ImageData=image).model_dump()}


__all__ = ["SignatureFragment", "signature_bucket"]
