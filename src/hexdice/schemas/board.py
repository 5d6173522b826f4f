from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from hexdice.domain.models import GameLogEntry, Region

if TYPE_CHECKING:
    from hexdice.domain.game import GameState


class HexRead(BaseModel):
    q: int = Field(..., description="Axial coordinate q")
    r: int = Field(..., description="Axial coordinate r")


class RegionRead(BaseModel):
    id: int = Field(..., description="Index into the board's region list")
    owner: int = Field(..., ge=0, description="Player controlling the region")
    number_of_dice: int = Field(..., ge=0, description="Dice stacked on the region")
    hexes: list[HexRead] = Field(..., min_length=1, description="Hexes in placement order")
    center_hex: HexRead = Field(..., description="Region hex nearest its center of mass")
    playable: bool = Field(
        default=False, description="Owned by the current player and has not attacked this turn"
    )

    @classmethod
    def from_domain(cls, region: Region, *, playable: bool = False) -> RegionRead:
        center = region.center_hex()
        return cls(
            id=region.id,
            owner=region.owner,
            number_of_dice=region.number_of_dice,
            hexes=[HexRead(q=h.q, r=h.r) for h in region.hexes],
            center_hex=HexRead(q=center.q, r=center.r),
            playable=playable,
        )


class GameLogEntryRead(BaseModel):
    turn_of_player: int
    turn_counter: int = Field(..., ge=0)
    region_1_id: int = Field(..., description="Attacking region")
    region_2_id: int = Field(..., description="Defending region")
    region_1_dice_result: list[int] = Field(default_factory=list)
    region_2_dice_result: list[int] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, entry: GameLogEntry) -> GameLogEntryRead:
        return cls(
            turn_of_player=entry.turn_of_player,
            turn_counter=entry.turn_counter,
            region_1_id=entry.region_1.id,
            region_2_id=entry.region_2.id,
            region_1_dice_result=list(entry.region_1_dice_result),
            region_2_dice_result=list(entry.region_2_dice_result),
        )


class GameStateRead(BaseModel):
    number_of_players: int = Field(..., ge=2)
    turn_of_player: int = Field(..., ge=0)
    turn_counter: int = Field(..., ge=0)
    winner: int | None = Field(None, description="Set once a single player owns every region")
    regions: list[RegionRead]
    game_log: list[GameLogEntryRead] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, state: GameState) -> GameStateRead:
        playable = {region.id for region in state.playable_regions()}
        return cls(
            number_of_players=state.number_of_players,
            turn_of_player=state.turn_of_player,
            turn_counter=state.turn_counter,
            winner=state.winner,
            regions=[
                RegionRead.from_domain(region, playable=region.id in playable)
                for region in state.board.regions
            ],
            game_log=[GameLogEntryRead.from_domain(entry) for entry in state.game_log],
        )
