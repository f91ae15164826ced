"""Re-target turn changes to group boundaries."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ctg.core.types import Direction
from ctg.domain.combat_models import Combatant, Group, turn_positions
from ctg.domain.modes import NONE_MODE
from ctg.domain.settings import CtgSettings
from ctg.services.errors import GroupSkippingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnChange:
    """Corrected turn produced by group skipping."""

    turn: int
    direction: Direction
    first_turns: List[int]


def first_turns(groups: Sequence[Group], turns: Sequence[Combatant]) -> List[int]:
    """Ascending turn indices of each group's first member."""
    positions = turn_positions(turns)
    indices = [positions[group.first.id] for group in groups if group.first.id in positions]
    return sorted(indices)


def turn_direction(
    current_round: int,
    current_turn: int,
    requested_round: int | None,
    requested_turn: int,
) -> Direction:
    """Forward or backward, judged by the round when it changes, else the turn."""
    if requested_round is not None and requested_round != current_round:
        return 1 if requested_round > current_round else -1
    return 1 if requested_turn > current_turn else -1


def next_group_turn(
    groups: Sequence[Group],
    turns: Sequence[Combatant],
    current_turn: int,
    direction: Direction,
) -> int:
    """
    Return the turn index of the next (or previous) group boundary.

    When ``current_turn`` is a group boundary the neighbouring boundary is
    chosen, wrapping around at either end. A mid-group turn anchors to the
    first boundary going forward and the last one going backward.
    """
    if direction not in (1, -1):
        raise ValueError(f"Direction must be 1 or -1, got {direction!r}")
    if len(groups) <= 1:
        raise GroupSkippingError("Group skipping needs at least two groups.")
    boundaries = first_turns(groups, turns)
    if not boundaries:
        raise GroupSkippingError("None of the groups are in the turn order.")

    if current_turn not in boundaries:
        return boundaries[0] if direction == 1 else boundaries[-1]
    target = boundaries.index(current_turn) + direction
    return boundaries[target % len(boundaries)]


def resolve_turn_change(
    groups: Sequence[Group],
    turns: Sequence[Combatant],
    *,
    current_round: int,
    current_turn: int,
    requested_turn: int | None,
    requested_round: int | None = None,
    settings: CtgSettings,
    is_gm: bool = True,
) -> TurnChange | None:
    """
    Intercept a pending turn change and skip by group.

    Returns None ("no change") unless the user is a GM, a turn change was
    requested, group skipping is on, a grouping mode is active and there is
    more than one group.
    """
    if (
        not is_gm
        or requested_turn is None
        or not settings.group_skipping
        or settings.mode == NONE_MODE
        or len(groups) <= 1
    ):
        return None

    direction = turn_direction(current_round, current_turn, requested_round, requested_turn)
    turn = next_group_turn(groups, turns, current_turn, direction)
    change = TurnChange(turn=turn, direction=direction, first_turns=first_turns(groups, turns))
    logger.debug(
        "Group skipping: next turn %d, first turns %s, currently at %d, %s",
        turn,
        change.first_turns,
        current_turn,
        "forward" if direction == 1 else "backward",
    )
    return change
