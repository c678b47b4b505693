"""Utility helpers for the application."""

from .logging_config import configure_logging
from .payload import compact, merge_dict, merge_fragments
from .time import (
    DOTTED_DATE,
    SLASHED_DATE,
    earliest_next_test_date,
    format_date,
    to_utc_series,
    to_utc_timestamp,
    vehicle_approval_retest_date,
)

__all__ = [
    "configure_logging",
    "compact",
    "merge_dict",
    "merge_fragments",
    "DOTTED_DATE",
    "SLASHED_DATE",
    "earliest_next_test_date",
    "format_date",
    "to_utc_series",
    "to_utc_timestamp",
    "vehicle_approval_retest_date",
]
