"""Partition the turn order into ordered groups."""
from __future__ import annotations

import json
import logging
import math
import warnings
from typing import Dict, Hashable, List, Sequence

from ctg.domain.combat_models import Combatant, Group, GroupingOptions, turn_positions
from ctg.domain.modes import GroupingMode
from ctg.domain.ordering import combatant_sort_key, group_sort_key
from ctg.domain.paths import MISSING, resolve_path
from ctg.services.errors import DuplicateMembershipWarning, MissingPathValueWarning
from ctg.services.mode_service import find_mode

logger = logging.getLogger(__name__)


def bucket_key(value: object) -> Hashable:
    """
    Hashable key for a resolved value.

    Equal numbers share a key whatever their type (15 and 15.0), while
    1, True and "1" stay apart.
    """
    if value is MISSING:
        return MISSING
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and math.isnan(value):
            return ("num", "nan")
        return ("num", value)
    if value is None or isinstance(value, (str, bool)):
        return (type(value).__name__, value)
    return ("json", json.dumps(value, sort_keys=True, default=str))


def is_grouped(combatant: Combatant, options: GroupingOptions) -> bool:
    """Return False for combatants left out of path-based grouping."""
    if not combatant.visible:
        return False
    if options.skip_hidden and combatant.hidden:
        return False
    if options.skip_player_characters and combatant.has_player_owner:
        return False
    return True


def _partition_by_path(
    combatants: Sequence[Combatant],
    path: str,
    options: GroupingOptions,
) -> List[List[Combatant]]:
    buckets: Dict[Hashable, List[Combatant]] = {}
    missing: List[str] = []
    for combatant in combatants:
        if not is_grouped(combatant, options):
            continue
        value = resolve_path(combatant, path)
        if value is MISSING:
            missing.append(combatant.id)
        buckets.setdefault(bucket_key(value), []).append(combatant)

    if missing:
        logger.debug("No value at %r for combatants %s; grouping them together", path, missing)
        warnings.warn(
            MissingPathValueWarning(f"{len(missing)} combatant(s) have no value at {path!r}"),
            stacklevel=3,
        )
    return list(buckets.values())


def _partition_external(
    combatants: Sequence[Combatant],
    external_groups: Sequence[Sequence[str]],
) -> List[List[Combatant]]:
    by_ref: Dict[str, Combatant] = {}
    for combatant in combatants:
        if combatant.token_id:
            by_ref.setdefault(combatant.token_id, combatant)
        by_ref.setdefault(combatant.id, combatant)

    positions = turn_positions(combatants)
    assigned: set[str] = set()
    assigned_ids: set[str] = set()
    partitions: List[List[Combatant]] = []
    for refs in external_groups:
        members: List[Combatant] = []
        for ref in refs:
            combatant = by_ref.get(ref)
            if ref in assigned or (combatant is not None and combatant.id in assigned_ids):
                logger.warning("%s is already in another group and was left out of this one", ref)
                warnings.warn(
                    DuplicateMembershipWarning(f"{ref} is already in another group"),
                    stacklevel=3,
                )
                continue
            assigned.add(ref)
            if combatant is not None:
                assigned_ids.add(combatant.id)
                members.append(combatant)
        members.sort(key=lambda member: positions[member.id])
        if members:
            partitions.append(members)
    return partitions


def build_groups(
    combatants: Sequence[Combatant],
    mode: str,
    modes: Sequence[GroupingMode],
    options: GroupingOptions,
    external_groups: Sequence[Sequence[str]] | None = None,
) -> List[Group]:
    """
    Group the canonical turn order under the given mode.

    Path modes bucket every grouped combatant by the value at the mode's
    path; modes without a path use ``external_groups`` (lists of combatant
    or token ids). Members and groups are then ordered with the combatant
    comparator. Raises InvalidModeError for an unknown mode.
    """
    grouping_mode = find_mode(modes, mode)

    if grouping_mode.is_external:
        partitions = _partition_external(combatants, external_groups or [])
    else:
        partitions = _partition_by_path(combatants, grouping_mode.path, options)

    positions = turn_positions(combatants)
    sort_options = options.sort
    member_key = combatant_sort_key(grouping_mode.path, sort_options, positions)
    groups = [Group(tuple(sorted(members, key=member_key))) for members in partitions]
    groups.sort(key=group_sort_key(grouping_mode.path, sort_options, positions))

    logger.debug("Built %d group(s) for mode %r", len(groups), mode)
    return groups


def group_ids(groups: Sequence[Group]) -> List[List[str]]:
    """Identifier lists handed to the rendering layer."""
    return [group.ids for group in groups]


def group_of(groups: Sequence[Group], combatant_id: str) -> Group | None:
    for group in groups:
        if combatant_id in group:
            return group
    return None

