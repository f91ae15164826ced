"""Grouping mode definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

NONE_MODE = "none"
MOB_MODE = "mob"
INITIATIVE_MODE = "initiative"
SELECTION_PATH = "flags.ctg.group"


@dataclass(frozen=True, slots=True)
class GroupingMode:
    """A named grouping strategy.

    An empty path means membership comes from an external partition
    rather than from an attribute of the combatant.
    """

    key: str
    path: str = ""

    @property
    def is_external(self) -> bool:
        return not self.path

    @property
    def title(self) -> str:
        return self.key[:1].upper() + self.key[1:]


DEFAULT_MODES: Tuple[GroupingMode, ...] = (
    GroupingMode(NONE_MODE, ""),
    GroupingMode(INITIATIVE_MODE, "initiative"),
    GroupingMode("name", "name"),
    GroupingMode("selection", SELECTION_PATH),
    GroupingMode("players", "players"),
)
