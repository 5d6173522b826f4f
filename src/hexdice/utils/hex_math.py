"""
Hexagonal coordinate math for the Hex Dice board.

The board is an unbounded axial grid; the generator only ever seeds patches
inside a square window around the origin, but patches may grow past it, so
nothing here clamps coordinates.

Coordinate Systems:
-------------------
1. Axial Coordinates (q, r) - for storage and region membership
   - Used in the HexCoord dataclass and as the board's occupancy keys

2. Cube Coordinates (x, y, z) - for distance calculations
   - x + y + z = 0
   - Conversion: x = q, z = r, y = -x - z

References:
-----------
https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass

# Direction vectors for the 6 neighbors in axial coordinates.
# The order only affects iteration, never adjacency.
_NEIGHBOR_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),  # East
    (1, -1),  # Northeast
    (0, -1),  # Northwest
    (-1, 0),  # West
    (-1, 1),  # Southwest
    (0, 1),  # Southeast
)


@dataclass(frozen=True, slots=True)
class HexCoord:
    """
    A hexagonal coordinate in the axial system.

    Attributes:
        q: Column coordinate (horizontal axis)
        r: Row coordinate (diagonal axis)

    Example:
        >>> HexCoord(q=0, r=0).neighbors()[0]
        HexCoord(q=1, r=0)
    """

    q: int
    r: int

    def neighbors(self) -> list[HexCoord]:
        """Return the six adjacent coordinates (E, NE, NW, W, SW, SE)."""
        return hex_neighbors(self)

    def as_tuple(self) -> tuple[int, int]:
        return (self.q, self.r)


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """
    Find all 6 adjacent hexes to the given hex.

    Args:
        coord: The center hex coordinate

    Returns:
        A list of 6 HexCoord objects in a fixed order

    Example:
        >>> origin = HexCoord(q=0, r=0)
        >>> len(hex_neighbors(origin))
        6
        >>> HexCoord(q=0, r=1) in hex_neighbors(origin)
        True
    """
    return [HexCoord(q=coord.q + dq, r=coord.r + dr) for dq, dr in _NEIGHBOR_DIRECTIONS]


def are_adjacent(a: HexCoord, b: HexCoord) -> bool:
    """Return True when ``b`` is one of the six neighbors of ``a``."""
    dq = b.q - a.q
    dr = b.r - a.r
    return (dq, dr) in _NEIGHBOR_DIRECTIONS


def axial_to_cube(coord: HexCoord) -> tuple[int, int, int]:
    """
    Convert axial coordinates (q, r) to cube coordinates (x, y, z).

    Example:
        >>> axial_to_cube(HexCoord(q=1, r=2))
        (1, -3, 2)
    """
    x = coord.q
    z = coord.r
    y = -x - z
    return x, y, z


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """
    Number of hex steps between ``a`` and ``b``.

    Example:
        >>> hex_distance(HexCoord(q=0, r=0), HexCoord(q=2, r=1))
        3
    """
    ax, ay, az = axial_to_cube(a)
    bx, by, bz = axial_to_cube(b)
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))
