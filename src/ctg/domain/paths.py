"""Dotted attribute path resolution over combatant-like records."""
from __future__ import annotations

from typing import Any, Mapping, Sequence


class _Missing:
    """Sentinel for a path that does not resolve to a value."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def split_path(path: str) -> list[str]:
    """Split a dotted path, ignoring empty segments."""
    return [segment for segment in path.split(".") if segment]


def _step(current: object, segment: str) -> object:
    if isinstance(current, Mapping):
        return current.get(segment, MISSING)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not segment.isdigit() or int(segment) >= len(current):
            return MISSING
        return current[int(segment)]
    if segment.startswith("_"):
        return MISSING
    return getattr(current, segment, MISSING)


def resolve_path(record: object, path: str) -> Any:
    """Walk ``path`` through ``record`` and return the value found there.

    Mappings are indexed by key, sequences by integer segment and anything
    else by attribute. Returns ``MISSING`` as soon as a segment is absent;
    an empty path also resolves to ``MISSING``.
    """
    segments = split_path(path)
    if not segments:
        return MISSING
    current: object = record
    for segment in segments:
        if current is None:
            return MISSING
        current = _step(current, segment)
        if current is MISSING:
            return MISSING
    return current
