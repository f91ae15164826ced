"""Command-line front end over the grouping services."""
from __future__ import annotations

import argparse
import locale
import logging
import random
import sys
from pathlib import Path
from typing import Sequence

from ctg.core.log import configure_logging
from ctg.core.rng import RNG
from ctg.data import DataError, load_encounter, load_settings
from ctg.domain.combat_models import Encounter
from ctg.domain.settings import CtgSettings
from ctg.presentation.cli.render import render_groups, render_rolls, render_tag_updates, render_turn_change
from ctg.services import (
    GroupSkippingError,
    InvalidFormulaError,
    InvalidModeError,
    build_groups,
    find_mode,
    manage_modes,
    resolve_turn_change,
)
from ctg.services.initiative_service import (
    DEFAULT_FORMULA,
    FormulaRoller,
    InitiativeService,
    should_roll_group_initiative,
)
from ctg.services.selection_service import tag_selection

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ctg", description="Group combatants in a combat tracker.")
    parser.add_argument("--config", type=Path, default=None, help="settings file to read")
    parser.add_argument("--mode", default=None, help="grouping mode to use instead of the saved one")
    parser.add_argument(
        "--integration",
        action="append",
        default=[],
        help="active integration (mob-attack-tool, lancer-initiative, scs)",
    )
    parser.add_argument("--player", action="store_true", help="view as a non-GM user")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    groups = sub.add_parser("groups", help="print the ordered groups")
    groups.add_argument("encounter", type=Path)
    groups.add_argument("--expand", action="store_true", help="list the members of every group")

    nxt = sub.add_parser("next", help="print the turn group skipping would move to")
    nxt.add_argument("encounter", type=Path)
    nxt.add_argument("--back", action="store_true", help="move to the previous group")
    nxt.add_argument("--group-skipping", action="store_true", help="force group skipping on")

    roll = sub.add_parser("roll", help="roll initiative once per group")
    roll.add_argument("encounter", type=Path)
    scope = roll.add_mutually_exclusive_group()
    scope.add_argument("--npc", action="store_true", help="only groups made entirely of NPCs")
    scope.add_argument("--combatant", action="append", default=[], help="only groups containing this id")
    roll.add_argument("--seed", type=int, default=None, help="seed the dice for repeatable rolls")
    roll.add_argument("--formula", default=DEFAULT_FORMULA)

    select = sub.add_parser("select", help="tag combatants so they group together")
    select.add_argument("encounter", type=Path)
    select.add_argument("ids", nargs="+", help="combatant or token ids")
    select.add_argument("--seed", type=int, default=None)
    return parser


def _prepare_settings(args: argparse.Namespace) -> CtgSettings:
    settings = load_settings(args.config)
    if args.mode is not None:
        settings.mode = args.mode
    current = settings.mode
    settings.modes, settings.mode = manage_modes(settings.modes, settings.mode, args.integration)
    if args.mode is not None and settings.mode != current:
        # An explicit mode that does not exist must fail rather than fall back.
        settings.mode = current
    return settings


def _cmd_groups(args: argparse.Namespace, settings: CtgSettings, encounter: Encounter) -> int:
    if not settings.shows_groups(is_gm=not args.player):
        print("Grouping is disabled.")
        return 0
    mode = find_mode(settings.modes, settings.mode)
    groups = build_groups(
        encounter.turns, settings.mode, settings.modes, settings.grouping_options, encounter.external_groups
    )
    current = encounter.current_combatant
    render_groups(
        groups,
        mode,
        current.id if current is not None else None,
        open_current=settings.open_toggles,
        expand=args.expand,
    )
    return 0


def _host_requested_turn(encounter: Encounter, back: bool) -> tuple[int, int]:
    count = len(encounter.turns)
    if back:
        if encounter.turn <= 0:
            return encounter.round - 1, max(count - 1, 0)
        return encounter.round, encounter.turn - 1
    if encounter.turn + 1 >= count:
        return encounter.round + 1, 0
    return encounter.round, encounter.turn + 1


def _cmd_next(args: argparse.Namespace, settings: CtgSettings, encounter: Encounter) -> int:
    if args.group_skipping:
        settings.group_skipping = True
    groups = []
    if settings.shows_groups(is_gm=True):
        groups = build_groups(
            encounter.turns, settings.mode, settings.modes, settings.grouping_options, encounter.external_groups
        )
    requested_round, requested_turn = _host_requested_turn(encounter, args.back)
    change = resolve_turn_change(
        groups,
        encounter.turns,
        current_round=encounter.round,
        current_turn=encounter.turn,
        requested_round=requested_round,
        requested_turn=requested_turn,
        settings=settings,
        is_gm=not args.player,
    )
    render_turn_change(change, requested_turn)
    return 0


def _cmd_roll(args: argparse.Namespace, settings: CtgSettings, encounter: Encounter) -> int:
    if not should_roll_group_initiative(settings, modifier_held=True):
        print("Grouping is disabled; nothing to roll.")
        return 0
    groups = build_groups(
        encounter.turns, settings.mode, settings.modes, settings.grouping_options, encounter.external_groups
    )
    if args.npc:
        context, ids = "roll_npc", []
    elif args.combatant:
        context, ids = "roll", list(args.combatant)
    else:
        context, ids = "roll_all", []
    if args.seed is not None:
        # d20 draws from the module-level generator.
        random.seed(args.seed)
    service = InitiativeService(FormulaRoller(formula=args.formula))
    render_rolls(service.roll_group_initiative(groups, context, ids))
    return 0


def _cmd_select(args: argparse.Namespace, settings: CtgSettings, encounter: Encounter) -> int:
    render_tag_updates(tag_selection(encounter.turns, args.ids, RNG(args.seed)))
    return 0


def _use_user_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Keeping default collation: %s", exc)


_COMMANDS = {
    "groups": _cmd_groups,
    "next": _cmd_next,
    "roll": _cmd_roll,
    "select": _cmd_select,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and return its exit status."""
    args = _build_parser().parse_args(argv)
    configure_logging(True if args.debug else None)
    _use_user_collation()
    try:
        settings = _prepare_settings(args)
        encounter = load_encounter(args.encounter)
        return _COMMANDS[args.command](args, settings, encounter)
    except InvalidModeError as exc:
        print(f"ctg | {exc}", file=sys.stderr)
        return 1
    except (DataError, InvalidFormulaError, GroupSkippingError) as exc:
        print(f"ctg | {exc}", file=sys.stderr)
        return 2
