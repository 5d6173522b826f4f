"""Combat resolution rules."""

from __future__ import annotations

import random
from dataclasses import dataclass

from hexdice.domain.enums import Side
from hexdice.domain.models import Board, GameLogEntry, PlayerID, RegionID
from hexdice.utils.rng import random_range


@dataclass(slots=True)
class CombatResolution:
    """Ownership and dice changes applied by one combat."""

    winner: Side
    winning_region_id: RegionID
    captured_region_id: RegionID
    new_owner: PlayerID
    transferred_dice: int
    attacker_total: int
    defender_total: int


def determine_winner(dice_1: list[int], dice_2: list[int]) -> Side:
    """Higher sum wins; the defender holds on a tie."""

    if sum(dice_1) > sum(dice_2):
        return Side.ATTACKER
    return Side.DEFENDER


def resolve_combat(board: Board, entry: GameLogEntry, rng: random.Random) -> CombatResolution:
    """Apply a rolled combat to ``board``.

    The losing region changes hands. When the winning stack had more than one
    die it is split: the captured region receives ``randrange(1, stack)`` dice
    and the winner keeps the rest plus one. The loser's own dice are discarded,
    so the pair ends up with one die more than the winning stack had.
    """

    winner = determine_winner(entry.region_1_dice_result, entry.region_2_dice_result)
    if winner is Side.ATTACKER:
        winning_snapshot, losing_snapshot = entry.region_1, entry.region_2
    else:
        winning_snapshot, losing_snapshot = entry.region_2, entry.region_1

    winning_region = board.region(winning_snapshot.id)
    captured_region = board.region(losing_snapshot.id)
    captured_region.owner = winning_snapshot.owner

    transferred = 0
    if winning_snapshot.number_of_dice > 1:
        transferred = random_range(rng, 1, winning_snapshot.number_of_dice)
        captured_region.number_of_dice = transferred
        winning_region.number_of_dice -= transferred - 1

    attacker_total, defender_total = entry.dice_sums
    return CombatResolution(
        winner=winner,
        winning_region_id=winning_region.id,
        captured_region_id=captured_region.id,
        new_owner=captured_region.owner,
        transferred_dice=transferred,
        attacker_total=attacker_total,
        defender_total=defender_total,
    )
