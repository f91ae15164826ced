"""Grouping mode lookup and maintenance."""
from __future__ import annotations

import logging
from typing import Collection, List, Sequence, Tuple

from ctg.domain.modes import INITIATIVE_MODE, MOB_MODE, NONE_MODE, GroupingMode
from ctg.services.errors import DuplicateModeError, InvalidModeError

logger = logging.getLogger(__name__)

MOB_ATTACK_TOOL = "mob-attack-tool"
LANCER_INITIATIVE = "lancer-initiative"
SIMULTANEOUS_COMBAT = "scs"

LANCER_MODE = GroupingMode("lancer", "data.activations.value")


def validate_modes(modes: Sequence[GroupingMode]) -> None:
    seen: set[str] = set()
    for mode in modes:
        if mode.key in seen:
            raise DuplicateModeError(f"Grouping mode {mode.key!r} is defined more than once.")
        seen.add(mode.key)


def find_mode(modes: Sequence[GroupingMode], key: str) -> GroupingMode:
    """Return the mode registered under ``key``."""
    for mode in modes:
        if mode.key == key:
            return mode
    raise InvalidModeError(key)


def has_mode(modes: Sequence[GroupingMode], key: str) -> bool:
    return any(mode.key == key for mode in modes)


def manage_modes(
    modes: Sequence[GroupingMode],
    current_mode: str,
    active_integrations: Collection[str] = (),
) -> Tuple[List[GroupingMode], str]:
    """
    Reconcile the configured modes with the active integrations.

    Adds the mob and lancer modes when their integrations are active,
    drops the initiative mode when simultaneous combat is active, and
    falls back to the "none" mode if the current one disappeared.
    Returns new lists; the inputs are left untouched.
    """
    updated = list(modes)
    if MOB_ATTACK_TOOL in active_integrations and not has_mode(updated, MOB_MODE):
        updated.append(GroupingMode(MOB_MODE, ""))
    if LANCER_INITIATIVE in active_integrations and not has_mode(updated, LANCER_MODE.key):
        updated.append(LANCER_MODE)
    if SIMULTANEOUS_COMBAT in active_integrations:
        updated = [mode for mode in updated if mode.key != INITIATIVE_MODE]

    validate_modes(updated)

    mode = current_mode
    if not has_mode(updated, mode):
        logger.info("Mode %r is no longer available, switching to %r", mode, NONE_MODE)
        mode = NONE_MODE
    return updated, mode
