"""Bounded, synchronous retry for remote reads."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from src.app.errors import CertificateGenerationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class RetryPolicy:
    """Run a callable up to ``attempts`` times without backoff.

    Soft reads pass ``fallback``, which is returned once every attempt has
    failed; essential reads omit it and the last error is re-raised.
    """

    def __init__(self, attempts: int = 3) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.attempts = attempts

    def run(self, fn: Callable[[], T], *, description: str = "remote call", fallback: object = _MISSING) -> T:
        last_error: CertificateGenerationError | None = None
        for attempt in range(self.attempts):
            try:
                return fn()
            except CertificateGenerationError as exc:
                last_error = exc
                logger.error(
                    "%s failed attempt=%d/%d error=%s",
                    description,
                    attempt + 1,
                    self.attempts,
                    exc,
                    extra={"attempt": attempt + 1},
                )

        if fallback is not _MISSING:
            logger.warning("%s exhausted %d attempts, using fallback", description, self.attempts)
            return fallback  # type: ignore[return-value]
        assert last_error is not None
        raise last_error


__all__ = ["RetryPolicy"]
