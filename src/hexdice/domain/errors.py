"""Exceptions raised by the Hex Dice rules layer."""

from __future__ import annotations


class InvariantViolation(AssertionError):
    """A caller broke the contract of a rules operation.

    Raised for combat begun on illegal regions, combat completed without a
    pending entry, out-of-range region ids and similar programming errors.
    These are not user-facing and are not meant to be recovered from.
    """


class BoardGenerationError(RuntimeError):
    """Board generation exceeded its placement attempt bound."""

    def __init__(self, patch: int, player: int, attempts: int) -> None:
        super().__init__(
            f"could not place patch {patch} for player {player} after {attempts} attempts"
        )
        self.patch = patch
        self.player = player
        self.attempts = attempts
