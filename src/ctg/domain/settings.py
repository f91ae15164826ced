"""User-facing settings for grouping behaviour."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ctg.domain.combat_models import GroupingOptions, SortOptions
from ctg.domain.modes import DEFAULT_MODES, NONE_MODE, GroupingMode


@dataclass
class CtgSettings:
    """Settings snapshot passed explicitly into every operation."""

    mode: str = NONE_MODE
    modes: List[GroupingMode] = field(default_factory=lambda: list(DEFAULT_MODES))
    sort_combatants: bool = True
    no_group_hidden: bool = False
    no_group_pcs: bool = False
    group_skipping: bool = False
    only_show_groups_for_gm: bool = False
    open_toggles: bool = True

    @property
    def sort_options(self) -> SortOptions:
        return SortOptions(sort_enabled=self.sort_combatants)

    @property
    def grouping_options(self) -> GroupingOptions:
        return GroupingOptions(
            sort_enabled=self.sort_combatants,
            skip_hidden=self.no_group_hidden,
            skip_player_characters=self.no_group_pcs,
        )

    def shows_groups(self, is_gm: bool) -> bool:
        """Return False when grouping is off or hidden from this user."""
        if self.mode == NONE_MODE:
            return False
        return is_gm or not self.only_show_groups_for_gm
