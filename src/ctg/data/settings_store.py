"""Settings persistence helpers."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from ctg.data.errors import DataError
from ctg.data.json_loader import load_json
from ctg.data.paths import get_default_settings_path
from ctg.domain.modes import DEFAULT_MODES, NONE_MODE, GroupingMode
from ctg.domain.settings import CtgSettings

logger = logging.getLogger(__name__)

_BOOL_KEYS = (
    "sort_combatants",
    "no_group_hidden",
    "no_group_pcs",
    "group_skipping",
    "only_show_groups_for_gm",
    "open_toggles",
)


def _normalize_modes(value: object) -> List[GroupingMode]:
    if not isinstance(value, list):
        return list(DEFAULT_MODES)
    modes: List[GroupingMode] = []
    seen: set[str] = set()
    for entry in value:
        if not isinstance(entry, (list, tuple)) or not entry:
            continue
        key = entry[0]
        path = entry[-1] if len(entry) > 1 else ""
        if not isinstance(key, str) or not isinstance(path, str) or not key or key in seen:
            continue
        seen.add(key)
        modes.append(GroupingMode(key, path))
    return modes or list(DEFAULT_MODES)


def settings_from_dict(raw: object) -> CtgSettings:
    """Build settings from decoded JSON, falling back to defaults per field."""
    settings = CtgSettings()
    if not isinstance(raw, dict):
        return settings
    settings.modes = _normalize_modes(raw.get("modes"))
    for key in _BOOL_KEYS:
        value = raw.get(key)
        if isinstance(value, bool):
            setattr(settings, key, value)
    mode = raw.get("mode")
    if isinstance(mode, str) and any(m.key == mode for m in settings.modes):
        settings.mode = mode
    else:
        settings.mode = NONE_MODE
    return settings


def settings_to_dict(settings: CtgSettings) -> dict[str, Any]:
    payload: dict[str, Any] = {key: getattr(settings, key) for key in _BOOL_KEYS}
    payload["mode"] = settings.mode
    payload["modes"] = [[mode.key, mode.path] for mode in settings.modes]
    return payload


def load_settings(path: Path | None = None) -> CtgSettings:
    """Load settings from disk or return defaults."""
    settings_path = path or get_default_settings_path()
    if not settings_path.exists():
        return CtgSettings()
    try:
        raw = load_json(settings_path, kind="settings")
    except DataError as exc:
        logger.warning("Ignoring unreadable settings file: %s", exc)
        return CtgSettings()
    return settings_from_dict(raw)


def save_settings(settings: CtgSettings, path: Path | None = None) -> None:
    """Persist settings to disk."""
    settings_path = path or get_default_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    payload = settings_to_dict(settings)
    settings_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
