"""Declarative rule configuration for Hex Dice."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoardRules:
    """Board carving and initial dice allocation constants."""

    board_size: int = 20
    patches_per_player: int = 16
    dice_per_patch: int = 4
    max_dice_per_region: int = 4  # exclusive upper bound of the initial draw
    min_players: int = 2
    max_players: int = 8
    max_placement_attempts: int = 10_000  # per patch

    @property
    def half_extent(self) -> int:
        return self.board_size // 2 - 1

    @property
    def dice_budget(self) -> int:
        return self.patches_per_player * self.dice_per_patch

    def patch_size(self, number_of_players: int) -> int:
        """Patch growth limit so that patches cover roughly half the board."""
        return (self.board_size * self.board_size) // (
            self.patches_per_player * number_of_players * 2
        )


@dataclass(frozen=True, slots=True)
class CombatRules:
    """Dice used when two regions clash."""

    die_sides: int = 6


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    board: BoardRules = BoardRules()
    combat: CombatRules = CombatRules()


DEFAULT_RULES = RulesConfig()
