from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd

DOTTED_DATE = "%d.%m.%Y"
SLASHED_DATE = "%d/%m/%Y"


def to_utc_timestamp(value: object) -> pd.Timestamp:
    """
    Convert a single timestamp-like value to a tz-aware UTC ``Timestamp``.
    Accepts ISO-8601 strings (with or without 'Z'), datetimes and
    ``Timestamp`` objects; naive values are assumed to be UTC.
    Missing or unparsable values become NaT.
    """

    if value is None or value == "":
        return pd.NaT
    if isinstance(value, (float, np.floating)) and pd.isna(value):
        return pd.NaT
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        return pd.NaT
    if ts is pd.NaT:
        return pd.NaT
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def to_utc_series(ts: pd.Series | Iterable[object]) -> pd.Series:
    """
    Convert a Series (or iterable) of timestamps to tz-aware UTC datetimes.
    Any unparsable element becomes NaT.
    """

    if not isinstance(ts, pd.Series):
        ts = pd.Series(list(ts), dtype=object)

    if pd.api.types.is_datetime64_any_dtype(ts):
        tz = getattr(ts.dt, "tz", None)
        if tz is None:
            return ts.dt.tz_localize("UTC")
        return ts.dt.tz_convert("UTC")

    # Ensure dtype is datetime64[ns, UTC]
    converted = pd.to_datetime(ts.map(to_utc_timestamp), utc=True, errors="coerce")
    return converted.astype("datetime64[ns, UTC]")


def format_date(value: object, fmt: str = DOTTED_DATE) -> str | None:
    """Render ``value`` in UTC using ``fmt``; ``None`` when it cannot be parsed."""

    ts = to_utc_timestamp(value)
    if ts is pd.NaT:
        return None
    return ts.strftime(fmt)


def earliest_next_test_date(anniversary: object) -> pd.Timestamp:
    """One month before ``anniversary``, moved to the first day of that month."""

    ts = to_utc_timestamp(anniversary)
    if ts is pd.NaT:
        return ts
    shifted = ts - pd.DateOffset(months=1)
    return shifted.replace(day=1)


def vehicle_approval_retest_date(started: object) -> str | None:
    """Retest date for IVA/MSVA inspections: six months on, less one day."""

    ts = to_utc_timestamp(started)
    if ts is pd.NaT:
        return None
    return (ts + pd.DateOffset(months=6) - pd.DateOffset(days=1)).strftime(SLASHED_DATE)


__all__ = [
    "DOTTED_DATE",
    "SLASHED_DATE",
    "to_utc_timestamp",
    "to_utc_series",
    "format_date",
    "earliest_next_test_date",
    "vehicle_approval_retest_date",
]
