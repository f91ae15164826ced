"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, Sequence

from ctg.domain.combat_models import Group
from ctg.domain.labels import group_display_name, group_label_value
from ctg.domain.modes import GroupingMode
from ctg.services.initiative_service import GroupInitiativeRoll
from ctg.services.selection_service import GroupTagUpdate
from ctg.services.turn_service import TurnChange


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_group_header(group: Group, mode: GroupingMode) -> str:
    header = f"{group_display_name(group)} ({len(group)})"
    value = group_label_value(group, mode)
    if value is not None:
        header += f" [{value}]"
    return header


def render_groups(
    groups: Sequence[Group],
    mode: GroupingMode,
    current_id: str | None = None,
    *,
    open_current: bool = True,
    expand: bool = False,
) -> None:
    """
    Print each group as a header, marking the current one with ``*``.

    Members are listed for every group when ``expand`` is set, otherwise
    only for the current group and only when ``open_current`` is on.
    """
    render_heading(f"Grouped by {mode.title}")
    if not groups:
        print("Nothing to group.")
        return
    for group in groups:
        is_current = current_id is not None and current_id in group
        marker = "*" if is_current else " "
        print(f"{marker} {format_group_header(group, mode)}")
        if not (expand or (open_current and is_current)):
            continue
        for member in group:
            print(f"    - {member.name or member.id} ({member.id})")


def render_turn_change(change: TurnChange | None, fallback_turn: int) -> None:
    render_heading("Next Turn")
    if change is None:
        print(f"No group skipping; next turn is {fallback_turn}.")
        return
    direction = "forward" if change.direction == 1 else "backward"
    print(f"Skipping {direction} to turn {change.turn}.")
    print(f"Group boundaries: {', '.join(str(turn) for turn in change.first_turns)}")


def render_rolls(rolls: Sequence[GroupInitiativeRoll]) -> None:
    render_heading("Group Initiative")
    if not rolls:
        print("No groups were eligible.")
        return
    for roll in rolls:
        print(f'"{roll.label}" group rolls {roll.total:g} for Initiative!')
        render_bullet_lines(f"{update.combatant_id}: {update.initiative:g}" for update in roll.updates)


def render_tag_updates(updates: Sequence[GroupTagUpdate]) -> None:
    render_heading("Selection")
    if not updates:
        print("No combatants selected.")
        return
    print(f"Group tag: {updates[0].group_tag}")
    render_bullet_lines(update.combatant_id for update in updates)
