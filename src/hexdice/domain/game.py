"""Game state and turn machine.

A match alternates between two calls made by the presentation layer:
``begin_combat`` when a player declares an attack, and ``complete_combat``
once the dice faces for both sides are known. Everything between the two
(animation, sound, timing) happens outside this module.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from hexdice.domain.combat import resolve_combat
from hexdice.domain.errors import InvariantViolation
from hexdice.domain.generation import generate_board
from hexdice.domain.models import (
    Board,
    CombatOutcome,
    GameLogEntry,
    PlayerID,
    Region,
    RegionID,
)
from hexdice.domain.rules_config import DEFAULT_RULES, RulesConfig
from hexdice.schemas.board import GameStateRead
from hexdice.utils.rng import generate_seed, make_rng, roll_dice

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameState:
    """The authoritative, mutable match session."""

    board: Board
    number_of_players: int
    turn_of_player: PlayerID = PlayerID(0)
    turn_counter: int = 0
    game_log: list[GameLogEntry] = field(default_factory=list)
    winner: PlayerID | None = None
    rules: RulesConfig = DEFAULT_RULES
    rng: random.Random = field(default_factory=make_rng, repr=False, compare=False)

    @classmethod
    def new_game(
        cls,
        number_of_players: int,
        *,
        seed: int | str | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> GameState:
        """Generate a board and open a session on it.

        With a seed, the board and every later random draw of the session are
        reproducible.
        """
        if seed is None:
            board_rng, combat_rng = make_rng(), make_rng()
        else:
            board_rng = make_rng(generate_seed(seed, "board"))
            combat_rng = make_rng(generate_seed(seed, "combat"))

        board = generate_board(number_of_players, rng=board_rng, rules=rules)
        return cls(board=board, number_of_players=number_of_players, rules=rules, rng=combat_rng)

    # --- queries -------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def pending_entry(self) -> GameLogEntry | None:
        """The declared combat still waiting for its dice, if any."""
        if self.game_log and self.game_log[-1].is_pending:
            return self.game_log[-1]
        return None

    def region(self, region_id: int) -> Region:
        return self.board.region(region_id)

    def regions_of(self, player: int) -> list[Region]:
        return self.board.regions_of(player)

    def region_counts(self) -> dict[PlayerID, int]:
        return dict(self.board.region_counts())

    def is_opponent(self, region_a: int, region_b: int) -> bool:
        """Whether ``region_a`` may attack ``region_b`` (ownership and border)."""
        return self.board.is_opponent(region_a, region_b)

    def attack_targets(self, region_id: int) -> list[Region]:
        return self.board.opponents_of(region_id)

    def moved_regions(self) -> set[RegionID]:
        """Ids of regions that already attacked during the current turn."""
        return {
            entry.region_1.id
            for entry in self.game_log
            if entry.turn_of_player == self.turn_of_player
            and entry.turn_counter == self.turn_counter
        }

    def playable_regions(self) -> list[Region]:
        """Current player's regions that have not attacked yet this turn."""
        moved = self.moved_regions()
        return [
            region for region in self.regions_of(self.turn_of_player) if region.id not in moved
        ]

    def unblocked_regions(self) -> list[Region]:
        """Playable regions that still border at least one opponent."""
        return [
            region for region in self.playable_regions() if self.board.opponents_of(region.id)
        ]

    def snapshot(self) -> GameStateRead:
        """Read-only copy of the session for renderers."""
        return GameStateRead.from_domain(self)

    # --- combat --------------------------------------------------------------

    def begin_combat(self, attacker_id: int, defender_id: int) -> GameLogEntry:
        """Declare an attack and log it as pending.

        Raises:
            InvariantViolation: If the game is over, another combat is pending,
                the attacker does not belong to the current player or the two
                regions are not opponents
        """
        if self.is_over:
            raise InvariantViolation("game is over")
        if self.pending_entry is not None:
            raise InvariantViolation("a combat is already waiting for its roll")

        attacker = self.region(attacker_id)
        defender = self.region(defender_id)
        if attacker.owner != self.turn_of_player:
            raise InvariantViolation(
                f"region {attacker_id} belongs to player {attacker.owner}, "
                f"not to player {self.turn_of_player}"
            )
        if not self.is_opponent(attacker_id, defender_id):
            raise InvariantViolation(f"region {attacker_id} cannot attack region {defender_id}")

        entry = GameLogEntry(
            turn_of_player=self.turn_of_player,
            turn_counter=self.turn_counter,
            region_1=attacker.snapshot(),
            region_2=defender.snapshot(),
        )
        self.game_log.append(entry)
        logger.debug(
            "player %d attacks region %d (%d dice) from region %d (%d dice)",
            self.turn_of_player,
            defender_id,
            defender.number_of_dice,
            attacker_id,
            attacker.number_of_dice,
        )
        return entry

    def roll_pending(self) -> tuple[list[int], list[int]]:
        """Roll the faces for the pending combat with the session random source."""
        entry = self._require_pending()
        sides = self.rules.combat.die_sides
        count_1, count_2 = entry.dice_counts
        return roll_dice(self.rng, count_1, sides), roll_dice(self.rng, count_2, sides)

    def complete_combat(self, dice_1: list[int], dice_2: list[int]) -> CombatOutcome:
        """Resolve the pending combat, then advance the turn and check for a winner."""
        entry = self._require_pending()
        self._check_faces(entry, dice_1, dice_2)
        entry.record_roll(dice_1, dice_2)

        resolution = resolve_combat(self.board, entry, self.rng)
        logger.debug(
            "combat %d vs %d: %s wins, region %d now owned by player %d",
            resolution.attacker_total,
            resolution.defender_total,
            resolution.winner,
            resolution.captured_region_id,
            resolution.new_owner,
        )

        turn_advanced = self._advance_turn_if_blocked()
        game_over = self._check_winner()

        return CombatOutcome(
            winner=resolution.winner,
            winning_region_id=resolution.winning_region_id,
            captured_region_id=resolution.captured_region_id,
            new_owner_of_region=resolution.new_owner,
            transferred_dice=resolution.transferred_dice,
            turn_advanced=turn_advanced,
            next_player=self.turn_of_player,
            game_over=game_over,
        )

    def _require_pending(self) -> GameLogEntry:
        entry = self.pending_entry
        if entry is None:
            raise InvariantViolation("no combat is waiting for a roll")
        return entry

    def _check_faces(self, entry: GameLogEntry, dice_1: list[int], dice_2: list[int]) -> None:
        sides = self.rules.combat.die_sides
        for label, faces, expected in (
            ("attacker", dice_1, entry.region_1.number_of_dice),
            ("defender", dice_2, entry.region_2.number_of_dice),
        ):
            if len(faces) != expected:
                raise InvariantViolation(f"{label} rolled {len(faces)} dice, expected {expected}")
            if any(not 1 <= face <= sides for face in faces):
                raise InvariantViolation(f"{label} faces out of range 1..{sides}: {faces}")

    # --- turn machine ----------------------------------------------------------

    def _advance_turn_if_blocked(self) -> bool:
        if self.unblocked_regions():
            return False

        previous = self.turn_of_player
        self.turn_of_player = self._next_player()
        self.turn_counter += 1
        logger.info(
            "turn %d: player %d has no moves left, player %d to play",
            self.turn_counter,
            previous,
            self.turn_of_player,
        )
        return True

    def _next_player(self) -> PlayerID:
        """Next player index, wrapping, skipping players without regions."""
        counts = self.board.region_counts()
        for step in range(1, self.number_of_players + 1):
            candidate = PlayerID((self.turn_of_player + step) % self.number_of_players)
            if counts[candidate] > 0:
                return candidate
        return PlayerID((self.turn_of_player + 1) % self.number_of_players)

    def _check_winner(self) -> PlayerID | None:
        if self.winner is not None:
            return None

        total = len(self.board.regions)
        for player, count in self.board.region_counts().items():
            if count == total:
                self.winner = player
                logger.info("player %d owns every region after %d turns", player, self.turn_counter)
                return player
        return None
