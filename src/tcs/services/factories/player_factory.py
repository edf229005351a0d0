"""Factory for creating the player unit."""
from __future__ import annotations

from tcs.domain.defs import get_unit_def
from tcs.domain.entities import Player, Stats

DEFAULT_PLAYER_NAME = "Hero"


def create_player(name: str) -> Player:
    """Instantiate a level 1 paladin; blank names fall back to the default."""
    unit_def = get_unit_def("paladin")
    stats = Stats.full(max_hp=unit_def.max_hp, max_mp=unit_def.max_mp, attack=unit_def.attack)
    return Player(name=name.strip() or DEFAULT_PLAYER_NAME, kind="paladin", stats=stats)
