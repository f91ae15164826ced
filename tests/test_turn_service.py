from __future__ import annotations

import logging

import pytest

from ctg.domain.combat_models import Group
from ctg.domain.settings import CtgSettings
from ctg.services.errors import GroupSkippingError
from ctg.services.turn_service import first_turns, next_group_turn, resolve_turn_change, turn_direction

from tests.helpers.combatants import make_combatant


def _turns_and_groups():
    """Ten turns split into groups starting at 0, 5 and 9."""
    turns = [make_combatant(f"c{index}") for index in range(10)]
    groups = [
        Group(tuple(turns[5:9])),
        Group(tuple(turns[9:])),
        Group(tuple(turns[0:5])),
    ]
    return turns, groups


def test_first_turns_are_sorted_numerically() -> None:
    turns, groups = _turns_and_groups()

    assert first_turns(groups, turns) == [0, 5, 9]


def test_forward_moves_to_next_boundary() -> None:
    turns, groups = _turns_and_groups()

    assert next_group_turn(groups, turns, 0, 1) == 5
    assert next_group_turn(groups, turns, 5, 1) == 9


def test_backward_moves_to_previous_boundary() -> None:
    turns, groups = _turns_and_groups()

    assert next_group_turn(groups, turns, 9, -1) == 5
    assert next_group_turn(groups, turns, 5, -1) == 0


def test_wraps_at_both_ends() -> None:
    turns, groups = _turns_and_groups()

    assert next_group_turn(groups, turns, 9, 1) == 0
    assert next_group_turn(groups, turns, 0, -1) == 9


def test_mid_group_turn_anchors_to_ends() -> None:
    turns, groups = _turns_and_groups()

    assert next_group_turn(groups, turns, 3, 1) == 0
    assert next_group_turn(groups, turns, 3, -1) == 9


def test_single_group_is_rejected() -> None:
    turns, groups = _turns_and_groups()

    with pytest.raises(GroupSkippingError):
        next_group_turn(groups[:1], turns, 0, 1)


def test_bad_direction_is_rejected() -> None:
    turns, groups = _turns_and_groups()

    with pytest.raises(ValueError):
        next_group_turn(groups, turns, 0, 2)  # type: ignore[arg-type]


def test_direction_follows_round_then_turn() -> None:
    assert turn_direction(current_round=2, current_turn=9, requested_round=3, requested_turn=0) == 1
    assert turn_direction(current_round=2, current_turn=0, requested_round=1, requested_turn=9) == -1
    assert turn_direction(current_round=2, current_turn=4, requested_round=None, requested_turn=5) == 1
    assert turn_direction(current_round=2, current_turn=4, requested_round=2, requested_turn=3) == -1


def _skipping_settings(**overrides) -> CtgSettings:
    settings = CtgSettings(mode="initiative", group_skipping=True)
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


def test_resolve_turn_change_skips_to_next_group(caplog: pytest.LogCaptureFixture) -> None:
    turns, groups = _turns_and_groups()

    with caplog.at_level(logging.DEBUG, logger="ctg"):
        change = resolve_turn_change(
            groups,
            turns,
            current_round=1,
            current_turn=0,
            requested_turn=1,
            settings=_skipping_settings(),
        )

    assert change is not None
    assert change.turn == 5
    assert change.direction == 1
    assert change.first_turns == [0, 5, 9]
    assert "Group skipping" in caplog.text


def test_resolve_turn_change_wraps_on_new_round() -> None:
    turns, groups = _turns_and_groups()

    change = resolve_turn_change(
        groups,
        turns,
        current_round=1,
        current_turn=9,
        requested_round=2,
        requested_turn=0,
        settings=_skipping_settings(),
    )

    assert change is not None
    assert change.turn == 0


@pytest.mark.parametrize(
    "overrides, is_gm, requested_turn",
    [
        ({"group_skipping": False}, True, 1),
        ({"mode": "none"}, True, 1),
        ({}, False, 1),
        ({}, True, None),
    ],
)
def test_resolve_turn_change_no_change(overrides, is_gm, requested_turn) -> None:
    turns, groups = _turns_and_groups()

    change = resolve_turn_change(
        groups,
        turns,
        current_round=1,
        current_turn=0,
        requested_turn=requested_turn,
        settings=_skipping_settings(**overrides),
        is_gm=is_gm,
    )

    assert change is None


def test_resolve_turn_change_needs_two_groups() -> None:
    turns, groups = _turns_and_groups()

    change = resolve_turn_change(
        groups[:1],
        turns,
        current_round=1,
        current_turn=0,
        requested_turn=1,
        settings=_skipping_settings(),
    )

    assert change is None
