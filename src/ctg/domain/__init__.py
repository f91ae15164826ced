"""Domain models and pure ordering helpers."""

from .combat_models import Combatant, Encounter, Group, GroupingOptions, SortOptions, turn_positions
from .modes import DEFAULT_MODES, GroupingMode
from .paths import MISSING, resolve_path
from .settings import CtgSettings

__all__ = [
    "Combatant",
    "CtgSettings",
    "DEFAULT_MODES",
    "Encounter",
    "Group",
    "GroupingMode",
    "GroupingOptions",
    "MISSING",
    "SortOptions",
    "resolve_path",
    "turn_positions",
]
