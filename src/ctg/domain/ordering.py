"""Deterministic ordering of combatants and groups."""
from __future__ import annotations

import functools
import locale
import math
import re
import unicodedata
from typing import Any, Callable, Literal, Mapping, Sequence

from ctg.domain.combat_models import Combatant, Group, SortOptions
from ctg.domain.paths import MISSING, resolve_path

Order = Literal[-1, 1]

_FOREIGN_KEY_PATTERN = re.compile(r"[A-Za-z0-9]{16}")


def is_numeric(value: object) -> bool:
    """Return True for finite numbers and strings that parse as one."""
    if isinstance(value, bool) or value is None or value is MISSING:
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def to_number(value: object) -> int | float:
    """Numeric value of a number or numeric string; ints stay exact."""
    if isinstance(value, (int, float)):
        return value
    text = str(value)
    try:
        return int(text)
    except ValueError:
        return float(text)


def is_composite(value: object) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Mapping, Sequence))


def looks_like_id(value: str) -> bool:
    """Return True when the string carries a 16 character document id."""
    return _FOREIGN_KEY_PATTERN.search(value) is not None


def _by_id(a: Combatant, b: Combatant) -> Order:
    return 1 if a.id > b.id else -1


def _by_turn_order(a: Combatant, b: Combatant, positions: Mapping[str, int]) -> Order:
    pa = positions.get(a.id, -1)
    pb = positions.get(b.id, -1)
    if pa == pb:
        return _by_id(a, b)
    return 1 if pa > pb else -1


def _higher_first(x: int | float, y: int | float, a: Combatant, b: Combatant) -> Order:
    if x == y:
        return _by_id(a, b)
    return -1 if x > y else 1


def _first_item(value: Any) -> Any:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value[0] if value else None
    return value


def _item_id(value: Any) -> str | None:
    if isinstance(value, Mapping):
        item_id = value.get("id")
    else:
        item_id = getattr(value, "id", None)
    return None if item_id is None else str(item_id)


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _locale_key(value: str) -> tuple[str, str, str]:
    """Collation key: base letters first, then case-folded text, then raw text."""
    folded = value.casefold()
    return locale.strxfrm(_strip_accents(folded)), locale.strxfrm(folded), value


def compare_combatants(
    a: Combatant,
    b: Combatant,
    path: str,
    options: SortOptions,
    positions: Mapping[str, int] | None = None,
) -> Order:
    """
    Strict total order over two combatants for the grouping path.

    Returns -1 when ``a`` comes first and 1 otherwise; never 0. Every
    branch falls back to the combatant ids on a tie.
    """
    if not options.sort_enabled:
        return _by_turn_order(a, b, positions or {})

    ia = resolve_path(a, path)
    ib = resolve_path(b, path)

    if isinstance(ia, bool) and isinstance(ib, bool):
        if ia == ib:
            return _by_id(a, b)
        return 1 if ia else -1

    if is_numeric(ia) and is_numeric(ib):
        return _higher_first(to_number(ia), to_number(ib), a, b)

    if is_composite(ia) and is_composite(ib):
        ka = _item_id(_first_item(ia))
        kb = _item_id(_first_item(ib))
        if ka == kb:
            return _by_id(a, b)
        if ka is None:
            return -1
        if kb is None:
            return 1
        return 1 if ka > kb else -1

    if isinstance(ia, str) and isinstance(ib, str):
        if looks_like_id(ia) and looks_like_id(ib):
            init_a = -math.inf if a.initiative is None else a.initiative
            init_b = -math.inf if b.initiative is None else b.initiative
            return _higher_first(init_a, init_b, a, b)
        ka, kb = _locale_key(ia), _locale_key(ib)
        if ka == kb:
            return _by_id(a, b)
        return -1 if ka > kb else 1

    return _by_id(a, b)


def combatant_sort_key(
    path: str,
    options: SortOptions,
    positions: Mapping[str, int] | None = None,
) -> Callable[[Combatant], Any]:
    """Key function for ``sorted`` built on :func:`compare_combatants`."""
    return functools.cmp_to_key(lambda a, b: compare_combatants(a, b, path, options, positions))


def group_sort_key(
    path: str,
    options: SortOptions,
    positions: Mapping[str, int] | None = None,
) -> Callable[[Group], Any]:
    """Order groups by their first (already sorted) member."""
    member_key = combatant_sort_key(path, options, positions)
    return lambda group: member_key(group.first)


def sort_combatants(
    combatants: Sequence[Combatant],
    path: str,
    options: SortOptions,
    positions: Mapping[str, int] | None = None,
) -> list[Combatant]:
    return sorted(combatants, key=combatant_sort_key(path, options, positions))
