"""Service layer exports."""

from .errors import (
    DuplicateMembershipWarning,
    DuplicateModeError,
    GroupSkippingError,
    InvalidFormulaError,
    InvalidModeError,
    MissingPathValueWarning,
)
from .grouping_service import build_groups
from .initiative_service import FormulaRoller, GroupInitiativeRoll, InitiativeService
from .mode_service import find_mode, manage_modes
from .selection_service import tag_selection
from .turn_service import TurnChange, next_group_turn, resolve_turn_change

__all__ = [
    "DuplicateMembershipWarning",
    "DuplicateModeError",
    "FormulaRoller",
    "GroupInitiativeRoll",
    "GroupSkippingError",
    "InitiativeService",
    "InvalidFormulaError",
    "InvalidModeError",
    "MissingPathValueWarning",
    "TurnChange",
    "build_groups",
    "find_mode",
    "manage_modes",
    "next_group_turn",
    "resolve_turn_change",
    "tag_selection",
]
