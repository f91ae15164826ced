"""Group combatants in a turn-based combat tracker."""

from ctg.domain import Combatant, CtgSettings, Group, GroupingMode, GroupingOptions, SortOptions
from ctg.domain.ordering import compare_combatants
from ctg.domain.paths import MISSING, resolve_path
from ctg.services import (
    InvalidModeError,
    build_groups,
    next_group_turn,
    resolve_turn_change,
)

__version__ = "0.1.0"

__all__ = [
    "Combatant",
    "CtgSettings",
    "Group",
    "GroupingMode",
    "GroupingOptions",
    "InvalidModeError",
    "MISSING",
    "SortOptions",
    "build_groups",
    "compare_combatants",
    "next_group_turn",
    "resolve_path",
    "resolve_turn_change",
]
