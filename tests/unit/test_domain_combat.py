"""Unit tests for combat resolution."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexdice.domain import combat
from hexdice.domain import models as dm
from hexdice.domain.enums import Side
from hexdice.utils.hex_math import HexCoord
from hexdice.utils.rng import make_rng


class FixedDraw:
    """Random source whose ``randrange`` always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        assert start <= self.value < stop
        return self.value


def _board(attacker_dice: int, defender_dice: int) -> dm.Board:
    return dm.Board(
        regions=[
            dm.Region(
                id=dm.RegionID(0),
                hexes=[HexCoord(0, 0)],
                owner=dm.PlayerID(0),
                number_of_dice=attacker_dice,
            ),
            dm.Region(
                id=dm.RegionID(1),
                hexes=[HexCoord(1, 0)],
                owner=dm.PlayerID(1),
                number_of_dice=defender_dice,
            ),
        ]
    )


def _entry(board: dm.Board, dice_1: list[int], dice_2: list[int]) -> dm.GameLogEntry:
    entry = dm.GameLogEntry(
        turn_of_player=dm.PlayerID(0),
        turn_counter=0,
        region_1=board.regions[0].snapshot(),
        region_2=board.regions[1].snapshot(),
    )
    entry.record_roll(dice_1, dice_2)
    return entry


def test_higher_sum_wins_for_attacker():
    assert combat.determine_winner([6, 4], [3, 3]) is Side.ATTACKER


def test_defender_holds_on_tie():
    assert combat.determine_winner([3, 4], [5, 2]) is Side.DEFENDER


@pytest.mark.parametrize("draw", [1, 2])
def test_attacker_captures_and_splits_stack(draw):
    board = _board(3, 2)
    entry = _entry(board, [4, 3, 3], [3, 4])
    rng = FixedDraw(draw)

    result = combat.resolve_combat(board, entry, rng)

    assert result.winner is Side.ATTACKER
    assert result.captured_region_id == 1
    assert result.new_owner == 0
    assert (result.attacker_total, result.defender_total) == (10, 7)
    assert rng.calls == [(1, 3)]
    assert board.regions[1].owner == 0
    assert board.regions[1].number_of_dice == draw
    assert board.regions[0].number_of_dice == 3 - (draw - 1)
    assert result.transferred_dice == draw


def test_defender_wins_and_takes_attacking_region():
    board = _board(2, 4)
    entry = _entry(board, [1, 2], [2, 2, 2, 2])

    result = combat.resolve_combat(board, entry, FixedDraw(3))

    assert result.winner is Side.DEFENDER
    assert result.winning_region_id == 1
    assert result.captured_region_id == 0
    assert board.regions[0].owner == 1
    assert board.regions[0].number_of_dice == 3
    assert board.regions[1].number_of_dice == 4 - 2


def test_single_die_winner_does_not_transfer():
    board = _board(1, 3)
    entry = _entry(board, [6], [1, 1, 1])
    rng = FixedDraw(1)

    result = combat.resolve_combat(board, entry, rng)

    assert result.winner is Side.ATTACKER
    assert result.transferred_dice == 0
    assert rng.calls == []
    assert board.regions[1].owner == 0
    assert board.regions[1].number_of_dice == 3
    assert board.regions[0].number_of_dice == 1


def test_resolution_is_deterministic_for_same_seed():
    outcomes = []
    for _ in range(2):
        board = _board(8, 5)
        entry = _entry(board, [6] * 8, [1] * 5)
        combat.resolve_combat(board, entry, make_rng(17))
        outcomes.append([(r.owner, r.number_of_dice) for r in board.regions])
    assert outcomes[0] == outcomes[1]


@given(
    attacker_dice=st.integers(min_value=1, max_value=8),
    defender_dice=st.integers(min_value=1, max_value=8),
    attacker_wins=st.booleans(),
    seed=st.integers(min_value=0),
)
def test_reinforcement_keeps_dice_and_adds_one_to_winning_stack(
    attacker_dice, defender_dice, attacker_wins, seed
):
    board = _board(attacker_dice, defender_dice)
    if attacker_wins:
        dice_1, dice_2 = [6] * attacker_dice, [1] * defender_dice
    else:
        dice_1, dice_2 = [1] * attacker_dice, [6] * defender_dice

    result = combat.resolve_combat(board, _entry(board, dice_1, dice_2), make_rng(seed))
    if result.winner is Side.ATTACKER:
        winner_before, loser_before = attacker_dice, defender_dice
    else:
        winner_before, loser_before = defender_dice, attacker_dice

    winning = board.regions[result.winning_region_id]
    captured = board.regions[result.captured_region_id]
    assert winning.owner == captured.owner
    assert winning.number_of_dice >= 1
    assert captured.number_of_dice >= 1
    if winner_before > 1:
        # the loser's stack is discarded; the winner's stack is split plus one
        assert winning.number_of_dice + captured.number_of_dice == winner_before + 1
        assert 1 <= captured.number_of_dice < winner_before
    else:
        assert winning.number_of_dice == 1
        assert captured.number_of_dice == loser_before
