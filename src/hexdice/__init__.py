"""Hex Dice: territory generation and combat rules for a hex-map dice game."""

from hexdice.domain.errors import BoardGenerationError, InvariantViolation
from hexdice.domain.game import GameState
from hexdice.domain.generation import generate_board
from hexdice.domain.models import Board, CombatOutcome, GameLogEntry, Region

__all__ = [
    "Board",
    "BoardGenerationError",
    "CombatOutcome",
    "GameLogEntry",
    "GameState",
    "InvariantViolation",
    "Region",
    "generate_board",
]
