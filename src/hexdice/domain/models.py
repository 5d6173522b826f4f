"""Dataclasses describing the Hex Dice board and match records.

Regions are carved once by the generator and keep their hexes for the whole
match; only ``owner`` and ``number_of_dice`` change afterwards, and only
through combat resolution.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import NewType

from hexdice.domain.enums import Side
from hexdice.domain.errors import InvariantViolation
from hexdice.utils.hex_math import HexCoord

# --- Strongly typed identifiers -------------------------------------------------

PlayerID = NewType("PlayerID", int)
RegionID = NewType("RegionID", int)


# --- Core dataclasses -----------------------------------------------------------


@dataclass(slots=True)
class Region:
    """A contiguous set of hexes forming one territory."""

    id: RegionID
    hexes: list[HexCoord]
    owner: PlayerID
    number_of_dice: int = 0

    def center_of_mass(self) -> tuple[float, float]:
        """Average axial coordinate of the region's hexes."""
        q = sum(h.q for h in self.hexes)
        r = sum(h.r for h in self.hexes)
        return (q / len(self.hexes), r / len(self.hexes))

    def center_hex(self) -> HexCoord:
        """The region's own hex closest to its center of mass.

        Ties keep the earliest hex in placement order.
        """
        cq, cr = self.center_of_mass()
        nearest = self.hexes[0]
        min_distance = math.inf
        for point in self.hexes:
            distance = math.hypot(cq - point.q, cr - point.r)
            if distance < min_distance:
                min_distance = distance
                nearest = point
        return nearest

    def borders(self, other: Region) -> bool:
        """True when some hex of ``self`` neighbors some hex of ``other``."""
        other_hexes = set(other.hexes)
        return any(
            neighbor in other_hexes for coord in self.hexes for neighbor in coord.neighbors()
        )

    def is_opponent(self, other: Region) -> bool:
        """True when ``other`` belongs to another player and shares a border."""
        return self.owner != other.owner and self.borders(other)

    def snapshot(self) -> Region:
        """Copy by value, detached from later mutation of the live region."""
        return replace(self, hexes=list(self.hexes))


@dataclass(slots=True)
class Board:
    """The full map: hex occupancy plus the ordered region list."""

    hexes: dict[HexCoord, PlayerID] = field(default_factory=dict)
    regions: list[Region] = field(default_factory=list)
    _adjacency: dict[RegionID, frozenset[RegionID]] | None = field(
        default=None, repr=False, compare=False
    )

    def region(self, region_id: int) -> Region:
        """Return the region with ``region_id`` or raise InvariantViolation."""
        if not 0 <= region_id < len(self.regions):
            raise InvariantViolation(f"region id {region_id} out of range")
        return self.regions[region_id]

    def regions_of(self, player: int) -> list[Region]:
        return [region for region in self.regions if region.owner == player]

    def region_counts(self) -> Counter[PlayerID]:
        """Number of regions held by each owner."""
        return Counter(region.owner for region in self.regions)

    def dice_totals(self) -> Counter[PlayerID]:
        totals: Counter[PlayerID] = Counter()
        for region in self.regions:
            totals[region.owner] += region.number_of_dice
        return totals

    def neighbor_ids(self, region_id: int) -> frozenset[RegionID]:
        """Ids of regions sharing a border with ``region_id``.

        Region hexes never change after generation, so the adjacency is built
        once on first use.
        """
        self.region(region_id)
        if self._adjacency is None:
            self._adjacency = self._build_adjacency()
        return self._adjacency[RegionID(region_id)]

    def is_opponent(self, region_a: int, region_b: int) -> bool:
        a = self.region(region_a)
        b = self.region(region_b)
        return a.owner != b.owner and RegionID(region_b) in self.neighbor_ids(region_a)

    def opponents_of(self, region_id: int) -> list[Region]:
        """Regions ``region_id`` may legally attack."""
        owner = self.region(region_id).owner
        return [
            self.regions[other]
            for other in sorted(self.neighbor_ids(region_id))
            if self.regions[other].owner != owner
        ]

    def _build_adjacency(self) -> dict[RegionID, frozenset[RegionID]]:
        region_of: dict[HexCoord, RegionID] = {}
        for region in self.regions:
            for coord in region.hexes:
                region_of[coord] = region.id

        adjacency: dict[RegionID, set[RegionID]] = {region.id: set() for region in self.regions}
        for region in self.regions:
            for coord in region.hexes:
                for neighbor in coord.neighbors():
                    other = region_of.get(neighbor)
                    if other is not None and other != region.id:
                        adjacency[region.id].add(other)
        return {region_id: frozenset(ids) for region_id, ids in adjacency.items()}


@dataclass(slots=True)
class GameLogEntry:
    """One combat attempt.

    Created pending when an attack is declared; the dice faces are recorded
    exactly once when the roll completes.
    """

    turn_of_player: PlayerID
    turn_counter: int
    region_1: Region
    region_2: Region
    region_1_dice_result: list[int] = field(default_factory=list)
    region_2_dice_result: list[int] = field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return not self.region_1_dice_result and not self.region_2_dice_result

    @property
    def dice_counts(self) -> tuple[int, int]:
        """How many dice each side rolls."""
        return (self.region_1.number_of_dice, self.region_2.number_of_dice)

    @property
    def dice_sums(self) -> tuple[int, int]:
        return (sum(self.region_1_dice_result), sum(self.region_2_dice_result))

    def record_roll(self, dice_1: list[int], dice_2: list[int]) -> None:
        if not self.is_pending:
            raise InvariantViolation("dice result already recorded for this combat")
        self.region_1_dice_result = list(dice_1)
        self.region_2_dice_result = list(dice_2)


@dataclass(slots=True)
class CombatOutcome:
    """What changed after a combat resolved, for the caller to redraw."""

    winner: Side
    winning_region_id: RegionID
    captured_region_id: RegionID
    new_owner_of_region: PlayerID
    transferred_dice: int
    turn_advanced: bool
    next_player: PlayerID
    game_over: PlayerID | None = None
    redrawn: bool = True
