"""Board generation: carve player regions out of an empty hex grid.

Patches are placed one per player per round so territory is spread evenly
over the players. Each patch is grown from a random seed hex by randomized
flood growth and is only accepted when it touches territory already on the
board, which keeps the whole map connected.
"""

from __future__ import annotations

import logging
import random
from collections import Counter

from hexdice.domain.errors import BoardGenerationError
from hexdice.domain.models import Board, PlayerID, Region, RegionID
from hexdice.domain.rules_config import DEFAULT_RULES, BoardRules, RulesConfig
from hexdice.utils.hex_math import HexCoord, hex_distance
from hexdice.utils.rng import make_rng, random_range

logger = logging.getLogger(__name__)

ORIGIN = HexCoord(q=0, r=0)


def generate_board(
    number_of_players: int,
    *,
    rng: random.Random | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> Board:
    """Build a new board with ``rules.board.patches_per_player`` regions per player.

    Raises:
        ValueError: If ``number_of_players`` is outside the supported range
        BoardGenerationError: If a patch cannot be placed within the attempt bound
    """

    board_rules = rules.board
    if not board_rules.min_players <= number_of_players <= board_rules.max_players:
        raise ValueError(
            f"number_of_players must be between {board_rules.min_players} and "
            f"{board_rules.max_players}, got {number_of_players}"
        )

    rng = rng or make_rng()
    patch_size = board_rules.patch_size(number_of_players)
    logger.debug("generating board for %d players, patch size %d", number_of_players, patch_size)

    board = Board()
    for patch in range(board_rules.patches_per_player):
        for player in range(number_of_players):
            patch_hexes = _place_patch(
                board,
                PlayerID(player),
                patch_size=patch_size,
                bootstrap=(patch == 0 and player == 0),
                rng=rng,
                board_rules=board_rules,
            )
            if patch_hexes is None:
                raise BoardGenerationError(patch, player, board_rules.max_placement_attempts)

            for coord in patch_hexes:
                board.hexes[coord] = PlayerID(player)
            board.regions.append(
                Region(
                    id=RegionID(len(board.regions)),
                    hexes=patch_hexes,
                    owner=PlayerID(player),
                    number_of_dice=0,
                )
            )

    allocate_dice(board, number_of_players, rng=rng, board_rules=board_rules)

    logger.info(
        "generated board: %d regions over %d hexes for %d players",
        len(board.regions),
        len(board.hexes),
        number_of_players,
    )
    return board


def _place_patch(
    board: Board,
    player: PlayerID,
    *,
    patch_size: int,
    bootstrap: bool,
    rng: random.Random,
    board_rules: BoardRules,
) -> list[HexCoord] | None:
    """Try seeds until a patch grows and touches the board; None when out of attempts."""

    half = board_rules.half_extent
    for attempt in range(board_rules.max_placement_attempts):
        seed = HexCoord(q=rng.randrange(-half, half), r=rng.randrange(-half, half))
        if seed in board.hexes:
            continue

        patch_hexes = _grow_patch(board, seed, patch_size, rng)
        if len(patch_hexes) == 1:
            logger.debug("player %d: patch at %s did not grow (attempt %d)", player, seed, attempt)
            continue

        if bootstrap or _touches_board(board, patch_hexes):
            return patch_hexes

        logger.debug("player %d: patch at %s is isolated (attempt %d)", player, seed, attempt)

    return None


def _grow_patch(
    board: Board, seed: HexCoord, patch_size: int, rng: random.Random
) -> list[HexCoord]:
    occupied = set(board.hexes)
    occupied.add(seed)
    patch_hexes = [seed]

    for _ in range(patch_size):
        # random iteration order avoids growing in one direction
        frontier: HexCoord | None = None
        for coord in rng.sample(patch_hexes, len(patch_hexes)):
            if any(neighbor not in occupied for neighbor in coord.neighbors()):
                frontier = coord
                break

        if frontier is None:
            break

        candidates = [neighbor for neighbor in frontier.neighbors() if neighbor not in occupied]
        chosen = rng.choice(candidates)
        patch_hexes.append(chosen)
        occupied.add(chosen)

    return patch_hexes


def _touches_board(board: Board, patch_hexes: list[HexCoord]) -> bool:
    return any(
        neighbor in board.hexes for coord in patch_hexes for neighbor in coord.neighbors()
    )


def allocate_dice(
    board: Board,
    number_of_players: int,
    *,
    rng: random.Random,
    board_rules: BoardRules = DEFAULT_RULES.board,
) -> None:
    """Give every region between 1 and ``max_dice_per_region - 1`` dice.

    Each player starts with ``dice_budget`` dice; regions draw from their
    owner's budget in placement order.
    """

    budget = {player: board_rules.dice_budget for player in range(number_of_players)}
    for region in board.regions:
        remaining = budget[region.owner]
        upper = min(board_rules.max_dice_per_region, remaining)
        if upper <= 1:
            region.number_of_dice = 1
            budget[region.owner] = max(remaining - 1, 0)
            continue

        region.number_of_dice = random_range(rng, 1, upper)
        budget[region.owner] = remaining - region.number_of_dice


def generation_stats(board: Board) -> dict[int, dict[str, int]]:
    """Per-player summary of a board: regions, hexes, dice and reach from the origin."""

    regions: Counter[int] = Counter()
    hexes: Counter[int] = Counter()
    dice: Counter[int] = Counter()
    reach: dict[int, int] = {}
    for region in board.regions:
        regions[region.owner] += 1
        hexes[region.owner] += len(region.hexes)
        dice[region.owner] += region.number_of_dice
        furthest = max(hex_distance(ORIGIN, coord) for coord in region.hexes)
        reach[region.owner] = max(reach.get(region.owner, 0), furthest)

    return {
        player: {
            "regions": regions[player],
            "hexes": hexes[player],
            "dice": dice[player],
            "reach": reach[player],
        }
        for player in sorted(regions)
    }
