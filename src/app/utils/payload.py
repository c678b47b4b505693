"""Utilities for composing certificate payload fragments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["merge_dict", "merge_fragments", "compact"]


def merge_dict(base: dict[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``patch`` into ``base``; ``patch`` wins on identical keys."""

    for key, value in patch.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            merge_dict(base[key], value)
        else:
            base[key] = dict(value) if isinstance(value, Mapping) else value
    return base


def merge_fragments(fragments: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Fold ``fragments`` left to right into a fresh mapping."""

    merged: dict[str, Any] = {}
    for fragment in fragments:
        merge_dict(merged, fragment or {})
    return merged


def compact(section: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *section* without ``None`` values (absent on the wire)."""

    return {key: value for key, value in section.items() if value is not None}
