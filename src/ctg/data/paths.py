"""Helpers for resolving per-user file locations."""
from __future__ import annotations

import os
from pathlib import Path


def get_user_data_dir() -> Path:
    """Return the per-user data directory, honouring CTG_CONFIG_DIR."""
    override = os.environ.get("CTG_CONFIG_DIR")
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "CombatTrackerGroups"
        return Path.home() / "CombatTrackerGroups"
    return Path.home() / ".config" / "combat_tracker_groups"


def get_default_settings_path() -> Path:
    """Return the default settings file path."""
    return get_user_data_dir() / "settings.json"
