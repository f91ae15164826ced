"""Combat domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple


@dataclass(frozen=True, slots=True, eq=False)
class Combatant:
    """Read-only snapshot of one participant in the host's turn order."""

    id: str
    name: str
    visible: bool = True
    hidden: bool = False
    has_player_owner: bool = False
    is_npc: bool = True
    initiative: float | None = None
    token_id: str | None = None
    actor_id: str | None = None
    players: Tuple[Mapping[str, Any], ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict)
    flags: Mapping[str, Any] = field(default_factory=dict)

    @property
    def group_tag(self) -> str | None:
        """Selection tag pinned by the group selection tool, if any."""
        ctg_flags = self.flags.get("ctg")
        if not isinstance(ctg_flags, Mapping):
            return None
        value = ctg_flags.get("group")
        return value if isinstance(value, str) else None


@dataclass(frozen=True, slots=True, eq=False)
class Group:
    """Non-empty ordered run of combatants treated as one unit."""

    members: Tuple[Combatant, ...]

    def __post_init__(self) -> None:
        if not self.members:
            raise ValueError("A group must contain at least one combatant.")

    @property
    def first(self) -> Combatant:
        return self.members[0]

    @property
    def ids(self) -> List[str]:
        return [member.id for member in self.members]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    def __contains__(self, combatant_id: object) -> bool:
        return any(member.id == combatant_id for member in self.members)


@dataclass(frozen=True, slots=True)
class SortOptions:
    """Controls whether combatants are ordered by the grouping path."""

    sort_enabled: bool = True


@dataclass(frozen=True, slots=True)
class GroupingOptions:
    """Options read fresh for every grouping pass."""

    sort_enabled: bool = True
    skip_hidden: bool = False
    skip_player_characters: bool = False

    @property
    def sort(self) -> SortOptions:
        return SortOptions(sort_enabled=self.sort_enabled)


@dataclass(slots=True)
class Encounter:
    """Snapshot of a running combat as supplied by the host."""

    turns: List[Combatant]
    round: int = 1
    turn: int = 0
    external_groups: List[List[str]] = field(default_factory=list)

    @property
    def current_combatant(self) -> Combatant | None:
        if 0 <= self.turn < len(self.turns):
            return self.turns[self.turn]
        return None


def turn_positions(turns: Sequence[Combatant]) -> Dict[str, int]:
    """Map combatant ids to their canonical turn-order index."""
    positions: Dict[str, int] = {}
    for index, combatant in enumerate(turns):
        positions.setdefault(combatant.id, index)
    return positions
