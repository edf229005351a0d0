"""Player unit model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tcs.domain.events import BattleEvent, LevelGainedEvent, WeaponForgedEvent
from tcs.domain.rules import (
    FORGE_DAMAGE_PERCENT,
    LEVEL_UP_DAMAGE_BONUS,
    LEVEL_UP_HP_BONUS,
    LEVEL_UP_MANA_BONUS,
)

from .unit import Unit


@dataclass(slots=True)
class Player(Unit):
    """The player-controlled unit; keeps a permanent damage value across matches."""

    base_attack: int = field(init=False)

    def __post_init__(self) -> None:
        self.base_attack = self.stats.attack

    def forge_weapon(self) -> List[BattleEvent]:
        """Raise current-match damage by a quarter of its current value."""
        bonus = int(self.stats.attack * FORGE_DAMAGE_PERCENT)
        self.stats.attack += bonus
        return [WeaponForgedEvent(unit_name=self.name, bonus=bonus, attack=self.stats.attack)]

    def gain_level(self) -> List[BattleEvent]:
        self.level += 1
        self.stats.max_hp += LEVEL_UP_HP_BONUS
        self.base_attack += LEVEL_UP_DAMAGE_BONUS
        self.stats.max_mp += LEVEL_UP_MANA_BONUS

        self.stats.hp = self.stats.max_hp
        self.stats.mp = self.stats.max_mp
        self.stats.attack = self.base_attack
        return [
            LevelGainedEvent(
                unit_name=self.name,
                level=self.level,
                hp_bonus=LEVEL_UP_HP_BONUS,
                mana_bonus=LEVEL_UP_MANA_BONUS,
                damage_bonus=LEVEL_UP_DAMAGE_BONUS,
            )
        ]

    def reset_battle_stats(self) -> None:
        """Drop forge bonuses and status effects after a match."""
        self.stats.attack = self.base_attack
        self.remove_status_effects()
