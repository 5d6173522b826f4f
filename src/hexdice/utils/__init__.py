"""Utility functions for the Hex Dice game system."""

from hexdice.utils.hex_math import HexCoord, are_adjacent, hex_distance, hex_neighbors
from hexdice.utils.rng import generate_seed, make_rng, random_range, roll_dice

__all__ = [
    "HexCoord",
    "are_adjacent",
    "generate_seed",
    "hex_distance",
    "hex_neighbors",
    "make_rng",
    "random_range",
    "roll_dice",
]
