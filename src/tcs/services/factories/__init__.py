"""Factory helpers for runtime entities."""

from .enemy_factory import create_enemy_unit, generate_encounter
from .id_factory import make_enemy_name
from .player_factory import DEFAULT_PLAYER_NAME, create_player

__all__ = [
    "DEFAULT_PLAYER_NAME",
    "create_enemy_unit",
    "create_player",
    "generate_encounter",
    "make_enemy_name",
]
