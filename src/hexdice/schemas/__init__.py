from .board import GameLogEntryRead, GameStateRead, HexRead, RegionRead

__all__ = [
    "GameLogEntryRead",
    "GameStateRead",
    "HexRead",
    "RegionRead",
]
