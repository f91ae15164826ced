"""Roll one initiative value per group."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence

import d20

from ctg.core.types import RollContext
from ctg.domain.combat_models import Combatant, Group
from ctg.domain.labels import group_display_name
from ctg.domain.modes import NONE_MODE
from ctg.domain.ordering import is_numeric, to_number
from ctg.domain.paths import resolve_path
from ctg.domain.settings import CtgSettings
from ctg.services.errors import InvalidFormulaError

logger = logging.getLogger(__name__)

DEFAULT_FORMULA = "1d20"
DEFAULT_BONUS_PATH = "data.attributes.init.total"

Roller = Callable[[Combatant], float]


@dataclass(frozen=True, slots=True)
class InitiativeUpdate:
    combatant_id: str
    initiative: float


@dataclass(frozen=True, slots=True)
class GroupInitiativeRoll:
    """One roll shared by every member of a group."""

    label: str
    total: float
    updates: List[InitiativeUpdate]


def roll_formula(formula: str) -> int:
    """Roll a dice expression such as ``"1d20 + 2"`` or ``"2d20kh1"`` and return its total."""
    if not formula.strip():
        raise InvalidFormulaError("Empty dice formula.")
    try:
        result = d20.roll(formula)
    except d20.RollError as exc:
        raise InvalidFormulaError(f"Invalid dice formula {formula!r}: {exc}") from exc
    logger.debug("Rolled %s", result)
    return result.total


class FormulaRoller:
    """Roll a formula and add the combatant's own initiative bonus."""

    def __init__(
        self,
        formula: str = DEFAULT_FORMULA,
        bonus_path: str = DEFAULT_BONUS_PATH,
    ) -> None:
        self._formula = formula
        self._bonus_path = bonus_path

    def __call__(self, combatant: Combatant) -> float:
        bonus = resolve_path(combatant, self._bonus_path)
        total = roll_formula(self._formula)
        return total + to_number(bonus) if is_numeric(bonus) else total


def should_roll_group_initiative(settings: CtgSettings, modifier_held: bool) -> bool:
    """Group initiative replaces normal rolls only while the modifier is held."""
    return settings.mode != NONE_MODE and modifier_held


def is_eligible(group: Group, context: RollContext, combatant_ids: Iterable[str] = ()) -> bool:
    if context == "roll_all":
        return True
    if context == "roll_npc":
        return all(member.is_npc for member in group)
    if context == "roll":
        return any(combatant_id in group for combatant_id in combatant_ids)
    raise ValueError(f"Unknown roll context: {context!r}")


class InitiativeService:
    """Rolls initiative for whole groups at once."""

    def __init__(self, roller: Roller) -> None:
        self._roller = roller

    def roll_group_initiative(
        self,
        groups: Sequence[Group],
        context: RollContext,
        combatant_ids: Sequence[str] = (),
    ) -> List[GroupInitiativeRoll]:
        """
        Roll for every eligible group and spread the result to its members.

        The roll is made for the group's first member. Each group is rolled
        at most once per call.
        """
        results: List[GroupInitiativeRoll] = []
        for group in groups:
            label = group_display_name(group)
            if not is_eligible(group, context, combatant_ids):
                logger.debug("Skipping group initiative for %r", label)
                continue
            total = self._roller(group.first)
            updates = [InitiativeUpdate(combatant_id=member.id, initiative=total) for member in group]
            logger.info("Rolled %s initiative for group %r", total, label)
            results.append(GroupInitiativeRoll(label=label, total=total, updates=updates))
        return results
