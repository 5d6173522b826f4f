"""Rules layer for Hex Dice.

* Dataclasses for regions, the board and the combat log (see :mod:`models`).
* Rule configuration objects (see :mod:`rules_config`).
* Board carving (:mod:`generation`), combat resolution (:mod:`combat`) and
  the turn machine (:mod:`game`).

Everything here runs in memory and knows nothing about rendering.
"""

from . import (
    autoplay,
    combat,
    enums,
    errors,
    game,
    generation,
    models,
    rules_config,
    selection,
)

__all__ = [
    "autoplay",
    "combat",
    "enums",
    "errors",
    "game",
    "generation",
    "models",
    "rules_config",
    "selection",
]
