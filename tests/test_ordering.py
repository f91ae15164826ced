from __future__ import annotations

import itertools

from ctg.domain.combat_models import SortOptions, turn_positions
from ctg.domain.ordering import compare_combatants, is_numeric, looks_like_id, sort_combatants

from tests.helpers.combatants import make_combatant

SORTED = SortOptions(sort_enabled=True)
UNSORTED = SortOptions(sort_enabled=False)


def test_numeric_values_sort_highest_first() -> None:
    high = make_combatant("x", initiative=18)
    low = make_combatant("y", initiative=4)

    assert compare_combatants(high, low, "initiative", SORTED) == -1
    assert compare_combatants(low, high, "initiative", SORTED) == 1


def test_numeric_tie_breaks_by_ascending_id() -> None:
    b = make_combatant("B", initiative=15)
    a = make_combatant("A", initiative=15)

    assert compare_combatants(a, b, "initiative", SORTED) == -1
    assert compare_combatants(b, a, "initiative", SORTED) == 1
    assert [c.id for c in sort_combatants([b, a], "initiative", SORTED)] == ["A", "B"]


def test_numeric_like_strings_compare_as_numbers() -> None:
    ten = make_combatant("a", data={"level": "10"})
    nine = make_combatant("b", data={"level": "9"})

    assert compare_combatants(ten, nine, "data.level", SORTED) == -1


def test_booleans_sort_true_last() -> None:
    x = make_combatant("X", data={"flag": True})
    y = make_combatant("Y", data={"flag": False})

    assert compare_combatants(y, x, "data.flag", SORTED) == -1
    assert compare_combatants(x, y, "data.flag", SORTED) == 1


def test_equal_booleans_fall_back_to_ids() -> None:
    a = make_combatant("a", data={"flag": True})
    b = make_combatant("b", data={"flag": True})

    assert compare_combatants(a, b, "data.flag", SORTED) == -1
    assert compare_combatants(b, a, "data.flag", SORTED) == 1


def test_composite_values_compare_first_item_id() -> None:
    a = make_combatant("a", players=({"id": "user2"}, {"id": "user0"}))
    b = make_combatant("b", players=({"id": "user1"},))

    assert compare_combatants(b, a, "players", SORTED) == -1
    assert compare_combatants(a, b, "players", SORTED) == 1


def test_foreign_key_strings_compare_by_initiative() -> None:
    tag = "aZ3kLp9QmN21xTy8"
    low = make_combatant("a", initiative=3, flags={"ctg": {"group": tag}})
    high = make_combatant("b", initiative=20, flags={"ctg": {"group": tag}})

    assert looks_like_id(tag)
    assert compare_combatants(high, low, "flags.ctg.group", SORTED) == -1
    assert compare_combatants(low, high, "flags.ctg.group", SORTED) == 1


def test_foreign_key_strings_ignore_lexical_order() -> None:
    first = make_combatant("a", initiative=1, flags={"ctg": {"group": "AAAAAAAAAAAAAAAA"}})
    second = make_combatant("b", initiative=9, flags={"ctg": {"group": "zzzzzzzzzzzzzzzz"}})

    assert compare_combatants(second, first, "flags.ctg.group", SORTED) == -1


def test_plain_strings_sort_in_reverse() -> None:
    goblin = make_combatant("1", "Goblin")
    orc = make_combatant("2", "Orc")

    assert compare_combatants(orc, goblin, "name", SORTED) == -1
    assert compare_combatants(goblin, orc, "name", SORTED) == 1


def test_mismatched_types_fall_back_to_ids() -> None:
    a = make_combatant("a", data={"v": "text"})
    b = make_combatant("b", data={"v": 3})

    assert compare_combatants(a, b, "data.v", SORTED) == -1
    assert compare_combatants(b, a, "data.v", SORTED) == 1


def test_missing_values_fall_back_to_ids() -> None:
    a = make_combatant("a")
    b = make_combatant("b")

    assert compare_combatants(b, a, "data.nothing", SORTED) == 1


def test_sorting_disabled_uses_turn_order() -> None:
    turns = [make_combatant("z", initiative=1), make_combatant("a", initiative=30)]
    positions = turn_positions(turns)

    assert compare_combatants(turns[0], turns[1], "initiative", UNSORTED, positions) == -1
    assert compare_combatants(turns[1], turns[0], "initiative", UNSORTED, positions) == 1


def test_antisymmetry_across_branches() -> None:
    combatants = [
        make_combatant("a", "Orc", initiative=10, data={"v": 5}),
        make_combatant("b", "Orc", initiative=10, data={"v": "5"}),
        make_combatant("c", "Elf", initiative=2, data={"v": True}),
        make_combatant("d", "Elf", initiative=None, data={"v": False}),
        make_combatant("e", "abcdefgh12345678", initiative=7, data={"v": [{"id": "q"}]}),
        make_combatant("f", "ABCDEFGH12345678", initiative=7, data={"v": {"id": "p"}}),
    ]
    for path in ("name", "initiative", "data.v", "data.none"):
        for a, b in itertools.permutations(combatants, 2):
            assert compare_combatants(a, b, path, SORTED) == -compare_combatants(b, a, path, SORTED)


def test_numeric_order_is_transitive() -> None:
    combatants = [make_combatant(cid, initiative=value) for cid, value in zip("edcba", (3, 8, 8, 1, 12))]
    ordered = sort_combatants(combatants, "initiative", SORTED)

    for a, b, c in itertools.permutations(ordered, 3):
        if compare_combatants(a, b, "initiative", SORTED) == -1 and compare_combatants(b, c, "initiative", SORTED) == -1:
            assert compare_combatants(a, c, "initiative", SORTED) == -1
    assert [c.id for c in ordered] == ["a", "c", "d", "e", "b"]


def test_is_numeric() -> None:
    assert is_numeric(3)
    assert is_numeric(2.5)
    assert is_numeric(" 12 ")
    assert not is_numeric(True)
    assert not is_numeric(None)
    assert not is_numeric("nan")
    assert not is_numeric("goblin")
    assert not is_numeric(float("inf"))


def test_huge_integers_compare_without_overflow() -> None:
    huge = make_combatant("a", data={"v": 10**400})
    small = make_combatant("b", data={"v": 3})
    text = make_combatant("c", data={"v": "12"})

    assert is_numeric(10**400)
    assert compare_combatants(huge, small, "data.v", SORTED) == -1
    assert compare_combatants(small, huge, "data.v", SORTED) == 1
    assert compare_combatants(huge, text, "data.v", SORTED) == -1


def test_accented_names_sort_by_base_letter() -> None:
    names = {"z": "Zed", "e": "Élan", "a": "abe", "f": "Fay"}
    combatants = [make_combatant(cid, name) for cid, name in names.items()]

    ordered = sort_combatants(combatants, "name", SORTED)

    assert [c.name for c in ordered] == ["Zed", "Fay", "Élan", "abe"]
