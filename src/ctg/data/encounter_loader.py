"""Load combat snapshots from JSON."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from ctg.data.errors import DataValidationError
from ctg.data.json_loader import load_json
from ctg.domain.combat_models import Combatant, Encounter

_BOOL_FIELDS = ("visible", "hidden", "has_player_owner", "is_npc")
_OPTIONAL_STR_FIELDS = ("token_id", "actor_id")


def load_encounter(path: Path | str) -> Encounter:
    """Read an encounter file and validate its structure."""
    raw = load_json(Path(path), kind="encounter")
    return parse_encounter(raw, context=str(path))


def parse_encounter(raw: object, context: str = "encounter") -> Encounter:
    payload = _require_mapping(raw, context)
    raw_combatants = payload.get("combatants", [])
    if not isinstance(raw_combatants, list):
        raise DataValidationError(f"{context} combatants must be a list.")

    turns: List[Combatant] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw_combatants):
        combatant = parse_combatant(entry, f"{context} combatant #{index}")
        if combatant.id in seen:
            raise DataValidationError(f"{context} has duplicate combatant id '{combatant.id}'.")
        seen.add(combatant.id)
        turns.append(combatant)

    external_groups = payload.get("external_groups", [])
    if not isinstance(external_groups, list):
        raise DataValidationError(f"{context} external_groups must be a list.")

    return Encounter(
        turns=turns,
        round=_require_int(payload.get("round", 1), f"{context} round"),
        turn=_require_int(payload.get("turn", 0), f"{context} turn"),
        external_groups=[
            _require_str_list(group, f"{context} external_groups[{index}]")
            for index, group in enumerate(external_groups)
        ],
    )


def parse_combatant(raw: object, context: str) -> Combatant:
    entry = _require_mapping(raw, context)
    combatant_id = entry.get("id")
    if not isinstance(combatant_id, str) or not combatant_id:
        raise DataValidationError(f"{context} id must be a non-empty string.")

    kwargs: Dict[str, Any] = {"id": combatant_id}
    kwargs["name"] = _require_str(entry.get("name", ""), f"{context} name")
    for name in _BOOL_FIELDS:
        if name in entry:
            kwargs[name] = _require_bool(entry[name], f"{context} {name}")
    for name in _OPTIONAL_STR_FIELDS:
        value = entry.get(name)
        if value is not None:
            kwargs[name] = _require_str(value, f"{context} {name}")

    initiative = entry.get("initiative")
    if initiative is not None:
        if isinstance(initiative, bool) or not isinstance(initiative, (int, float)):
            raise DataValidationError(f"{context} initiative must be a number or null.")
        kwargs["initiative"] = initiative

    players = entry.get("players", [])
    if not isinstance(players, list):
        raise DataValidationError(f"{context} players must be a list.")
    kwargs["players"] = tuple(_require_mapping(player, f"{context} players") for player in players)
    kwargs["data"] = _require_mapping(entry.get("data", {}), f"{context} data")
    kwargs["flags"] = _require_mapping(entry.get("flags", {}), f"{context} flags")
    return Combatant(**kwargs)


def _require_mapping(value: object, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DataValidationError(f"{context} must be an object/dict.")
    return value


def _require_str(value: object, context: str) -> str:
    if not isinstance(value, str):
        raise DataValidationError(f"{context} must be a string.")
    return value


def _require_bool(value: object, context: str) -> bool:
    if not isinstance(value, bool):
        raise DataValidationError(f"{context} must be a boolean.")
    return value


def _require_int(value: object, context: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataValidationError(f"{context} must be an integer.")
    return value


def _require_str_list(value: object, context: str) -> List[str]:
    if not isinstance(value, list):
        raise DataValidationError(f"{context} must be a list.")
    result: List[str] = []
    for item in value:
        if not isinstance(item, str):
            raise DataValidationError(f"{context} entries must be strings.")
        result.append(item)
    return result
