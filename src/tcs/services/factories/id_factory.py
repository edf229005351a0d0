"""Utilities for naming spawned units."""
from __future__ import annotations

from tcs.domain.defs import UnitDef

FIRST_MATCH_ENEMY_NAME = "Goblin Scavenger"


def make_enemy_name(unit_def: UnitDef, slot: int) -> str:
    """Return a display name disambiguated by the 1-based encounter slot."""
    return f"{unit_def.name} {unit_def.spawn_title} {slot}"
