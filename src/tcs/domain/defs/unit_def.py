"""Unit definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from tcs.core.types import UnitKind


@dataclass(frozen=True, slots=True)
class UnitDef:
    """Base stats and ability label for one unit kind."""

    kind: UnitKind
    name: str
    max_hp: int
    max_mp: int
    attack: int
    ability_name: str
    spawn_title: str = ""


UNIT_DEFS: Dict[UnitKind, UnitDef] = {
    "paladin": UnitDef("paladin", "Paladin", max_hp=150, max_mp=20, attack=15, ability_name="Holy Smite"),
    "goblin": UnitDef(
        "goblin", "Goblin", max_hp=60, max_mp=10, attack=10, ability_name="Sneak Attack", spawn_title="the Sly"
    ),
    "orc": UnitDef("orc", "Orc", max_hp=100, max_mp=12, attack=12, ability_name="Berserk", spawn_title="the Sharp"),
    "ghoul": UnitDef(
        "ghoul", "Ghoul", max_hp=140, max_mp=15, attack=15, ability_name="Feral Sweep", spawn_title="the Undead"
    ),
    "dragon": UnitDef(
        "dragon", "Dragon", max_hp=200, max_mp=20, attack=20, ability_name="Dragon's Wrath", spawn_title="the Mighty"
    ),
}


def get_unit_def(kind: str) -> UnitDef:
    """Return the definition for ``kind``; raises KeyError when unknown."""
    return UNIT_DEFS[kind]  # type: ignore[index]
