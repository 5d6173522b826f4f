"""Enumerations used across the Hex Dice domain."""

from __future__ import annotations

from enum import StrEnum


class Side(StrEnum):
    """The two parties of a combat."""

    ATTACKER = "attacker"
    DEFENDER = "defender"
