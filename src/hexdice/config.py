"""Lightweight configuration for Hex Dice sessions."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexdice.domain.rules_config import BoardRules, CombatRules, RulesConfig


class Settings(BaseSettings):
    """Session settings, overridable through ``HEXDICE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEXDICE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    number_of_players: int = Field(default=2, ge=2, le=8, description="Players in the match")
    seed: int | None = Field(default=None, ge=0, description="Match seed; random when unset")
    board_size: int = Field(default=20, ge=4, description="Side length of the seeding window")
    patches_per_player: int = Field(default=16, ge=1, description="Regions carved per player")
    dice_per_patch: int = Field(
        default=4, ge=1, description="Average dice per region used to size each budget"
    )
    max_placement_attempts: int = Field(
        default=10_000, gt=0, description="Seeds tried per patch before generation fails"
    )
    die_sides: int = Field(default=6, ge=2, description="Faces on each combat die")
    max_combats: int = Field(
        default=5_000, gt=0, description="Upper bound on combats in an unattended match"
    )
    log_level: str = Field(default="INFO", description="Root logging level for the CLI")

    def rules(self) -> RulesConfig:
        """Rule configuration reflecting these settings."""

        return RulesConfig(
            board=BoardRules(
                board_size=self.board_size,
                patches_per_player=self.patches_per_player,
                dice_per_patch=self.dice_per_patch,
                max_placement_attempts=self.max_placement_attempts,
            ),
            combat=CombatRules(die_sides=self.die_sides),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
