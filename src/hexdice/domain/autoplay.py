"""Random legal-move driver for unattended matches."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from hexdice.domain.game import GameState
from hexdice.domain.models import PlayerID, RegionID

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MatchSummary:
    """How an unattended match ended."""

    combats: int
    turns: int
    winner: PlayerID | None
    stalled: bool = False


def choose_attack(state: GameState, rng: random.Random) -> tuple[RegionID, RegionID] | None:
    """Pick a random legal attack for the current player.

    Only regions that have not attacked yet this turn are considered; the turn
    passes once none of them can attack.
    """
    candidates = state.unblocked_regions()
    if not candidates:
        return None

    attacker = rng.choice(candidates)
    defender = rng.choice(state.attack_targets(attacker.id))
    return attacker.id, defender.id


def play_match(
    state: GameState, *, max_combats: int, rng: random.Random | None = None
) -> MatchSummary:
    """Play random attacks until someone owns the board or ``max_combats`` is reached."""
    rng = rng or state.rng
    combats = 0
    while not state.is_over and combats < max_combats:
        move = choose_attack(state, rng)
        if move is None:
            logger.warning("player %d has no legal attack; match stalled", state.turn_of_player)
            return MatchSummary(
                combats=combats, turns=state.turn_counter, winner=None, stalled=True
            )

        state.begin_combat(*move)
        dice_1, dice_2 = state.roll_pending()
        state.complete_combat(dice_1, dice_2)
        combats += 1

    return MatchSummary(combats=combats, turns=state.turn_counter, winner=state.winner)
