"""Data layer utilities for loading encounters and settings."""

from .encounter_loader import load_encounter, parse_encounter
from .errors import DataError, DataLoadError, DataValidationError
from .settings_store import load_settings, save_settings

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "load_encounter",
    "load_settings",
    "parse_encounter",
    "save_settings",
]
