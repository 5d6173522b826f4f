"""Region picking: the source-then-target click sequence of an attack."""

from __future__ import annotations

from dataclasses import dataclass

from hexdice.domain.game import GameState
from hexdice.domain.models import CombatOutcome, GameLogEntry, RegionID


@dataclass(slots=True)
class SelectedRegion:
    """Transient selection of the current player's attack source.

    Not part of the authoritative game state.
    """

    region_id: RegionID | None = None

    @property
    def is_selected(self) -> bool:
        return self.region_id is not None

    def select(self, region_id: int) -> None:
        self.region_id = RegionID(region_id)

    def deselect(self) -> None:
        self.region_id = None


def pick_region(
    state: GameState, selection: SelectedRegion, region_id: int
) -> GameLogEntry | None:
    """Handle a click on ``region_id``.

    Own region: it becomes the selection. Foreign region with a selection
    that borders it: combat begins and the pending entry is returned. Any
    other foreign click clears the selection. Clicks while a roll is pending
    are ignored.
    """
    if state.is_over:
        selection.deselect()
        return None
    if state.pending_entry is not None:
        return None

    region = state.region(region_id)
    if region.owner == state.turn_of_player:
        selection.select(region_id)
        return None

    entry = None
    if selection.region_id is not None and state.is_opponent(selection.region_id, region_id):
        entry = state.begin_combat(selection.region_id, region_id)

    selection.deselect()
    return entry


def finish_combat(
    state: GameState, selection: SelectedRegion, dice_1: list[int], dice_2: list[int]
) -> CombatOutcome:
    """Complete the pending combat and drop the selection."""
    outcome = state.complete_combat(dice_1, dice_2)
    selection.deselect()
    return outcome
