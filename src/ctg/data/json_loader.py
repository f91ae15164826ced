"""Reading encounter and settings files."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path, kind: str = "data") -> object:
    """
    Decode the JSON document at ``path``.

    ``kind`` names the file in error messages ("encounter", "settings").
    Missing, unreadable, non-UTF-8 and malformed files all raise
    DataLoadError carrying the offending path.
    """
    label = kind.capitalize()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"{label} file not found: {path}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"{label} file is not UTF-8 text: {path}", path=path) from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read {kind} file: {path}", path=path) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(
            f"Invalid JSON in {kind} file {path} (line {exc.lineno}, column {exc.colno}): {exc.msg}",
            path=path,
        ) from exc
