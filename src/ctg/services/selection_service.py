"""Tag selected combatants so they group together."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Sequence

from ctg.core.rng import RNG
from ctg.domain.combat_models import Combatant

logger = logging.getLogger(__name__)

GROUP_TAG_LENGTH = 16


@dataclass(frozen=True, slots=True)
class GroupTagUpdate:
    combatant_id: str
    group_tag: str

    def as_changes(self) -> Dict[str, str]:
        return {"_id": self.combatant_id, "flags.ctg.group": self.group_tag}


def tag_selection(
    combatants: Sequence[Combatant],
    selected_ids: Sequence[str],
    rng: RNG,
) -> List[GroupTagUpdate]:
    """
    Give every selected combatant one fresh group tag.

    ``selected_ids`` may hold combatant or token ids; unknown ids are
    ignored and each combatant is tagged once.
    """
    by_ref: Dict[str, Combatant] = {}
    for combatant in combatants:
        if combatant.token_id:
            by_ref.setdefault(combatant.token_id, combatant)
        by_ref.setdefault(combatant.id, combatant)

    chosen: List[Combatant] = []
    for ref in selected_ids:
        combatant = by_ref.get(ref)
        if combatant is not None and combatant not in chosen:
            chosen.append(combatant)
    if not chosen:
        return []

    tag = rng.random_id(GROUP_TAG_LENGTH)
    logger.debug("Tagging %d combatant(s) with group %s", len(chosen), tag)
    return [GroupTagUpdate(combatant_id=combatant.id, group_tag=tag) for combatant in chosen]


def apply_group_tags(combatants: Sequence[Combatant], updates: Sequence[GroupTagUpdate]) -> List[Combatant]:
    """Return new combatant snapshots carrying the given tags."""
    tags = {update.combatant_id: update.group_tag for update in updates}
    result: List[Combatant] = []
    for combatant in combatants:
        tag = tags.get(combatant.id)
        if tag is None:
            result.append(combatant)
            continue
        flags = dict(combatant.flags)
        existing = flags.get("ctg")
        ctg_flags = dict(existing) if isinstance(existing, Mapping) else {}
        ctg_flags["group"] = tag
        flags["ctg"] = ctg_flags
        result.append(replace(combatant, flags=flags))
    return result
