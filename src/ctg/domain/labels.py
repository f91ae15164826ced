"""Display helpers for group headers."""
from __future__ import annotations

from typing import Any, Iterable, List

from ctg.domain.combat_models import Combatant, Group
from ctg.domain.modes import INITIATIVE_MODE, GroupingMode
from ctg.domain.paths import MISSING, resolve_path


def _unique_names(members: Iterable[Combatant]) -> List[str]:
    names: List[str] = []
    for member in members:
        if member.name and member.name not in names:
            names.append(member.name)
    return names


def group_display_name(group: Group) -> str:
    """Shared member name, or the distinct names joined in order."""
    names = _unique_names(group)
    if not names:
        return group.first.id
    return ", ".join(names)


def group_label_value(group: Group, mode: GroupingMode) -> Any:
    """Value shown next to the header; only the initiative mode has one."""
    if mode.key != INITIATIVE_MODE or mode.is_external:
        return None
    value = resolve_path(group.first, mode.path)
    return None if value is MISSING else value
