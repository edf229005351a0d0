"""Base combat unit model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from tcs.core.types import UnitKind
from tcs.domain.abilities import get_special_ability
from tcs.domain.events import (
    AttackEvent,
    BattleEvent,
    BleedAppliedEvent,
    BleedTickEvent,
    DamageTakenEvent,
    HealedEvent,
    UnitDefeatedEvent,
)
from tcs.domain.rules import BLEED_DAMAGE_PER_TURN

from .stats import Stats


@dataclass(slots=True)
class Unit:
    """A combatant with health, mana, damage and a bleed counter.

    Mutating operations return the events they produced so the caller can
    forward them to whatever is rendering the battle.
    """

    name: str
    kind: UnitKind
    stats: Stats
    level: int = 1
    bleed_turns: int = 0

    @property
    def hp(self) -> int:
        return self.stats.hp

    @property
    def max_hp(self) -> int:
        return self.stats.max_hp

    @property
    def mp(self) -> int:
        return self.stats.mp

    @property
    def max_mp(self) -> int:
        return self.stats.max_mp

    @property
    def attack_damage(self) -> int:
        return self.stats.attack

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0

    @property
    def is_bleeding(self) -> bool:
        return self.bleed_turns > 0

    # -----------------------
    # Health
    # -----------------------
    def take_damage(self, amount: int) -> List[BattleEvent]:
        if not self.is_alive:
            return []
        self.stats.hp = max(0, self.stats.hp - amount)
        events: List[BattleEvent] = [
            DamageTakenEvent(unit_name=self.name, amount=amount, hp=self.stats.hp, max_hp=self.stats.max_hp)
        ]
        if not self.is_alive:
            events.append(UnitDefeatedEvent(unit_name=self.name))
        return events

    def heal(self, amount: int) -> List[BattleEvent]:
        if not self.is_alive:
            return []
        before = self.stats.hp
        self.stats.hp = min(self.stats.max_hp, self.stats.hp + amount)
        return [
            HealedEvent(
                unit_name=self.name,
                amount=self.stats.hp - before,
                hp=self.stats.hp,
                max_hp=self.stats.max_hp,
            )
        ]

    # -----------------------
    # Mana
    # -----------------------
    def consume_mana(self, amount: int) -> bool:
        """Spend ``amount`` mana if available; leaves mana untouched otherwise."""
        if self.stats.mp < amount:
            return False
        self.stats.mp -= amount
        return True

    def regenerate_mana(self, amount: int) -> int:
        """Restore mana up to the cap and return how much was actually gained."""
        if not self.is_alive:
            return 0
        before = self.stats.mp
        self.stats.mp = min(self.stats.max_mp, self.stats.mp + amount)
        return self.stats.mp - before

    # -----------------------
    # Status effects
    # -----------------------
    def apply_bleed(self, turns: int) -> List[BattleEvent]:
        # Overwrites any remaining duration.
        self.bleed_turns = turns
        return [BleedAppliedEvent(unit_name=self.name, turns=turns)]

    def process_status_effects(self) -> List[BattleEvent]:
        if self.bleed_turns <= 0 or not self.is_alive:
            return []
        self.bleed_turns -= 1
        events: List[BattleEvent] = [
            BleedTickEvent(unit_name=self.name, damage=BLEED_DAMAGE_PER_TURN, turns_remaining=self.bleed_turns)
        ]
        events.extend(self.take_damage(BLEED_DAMAGE_PER_TURN))
        return events

    def remove_status_effects(self) -> None:
        self.bleed_turns = 0

    # -----------------------
    # Actions
    # -----------------------
    def attack(self, target: "Unit") -> List[BattleEvent]:
        events: List[BattleEvent] = [AttackEvent(attacker_name=self.name, target_name=target.name)]
        events.extend(target.take_damage(self.stats.attack))
        return events

    def use_special_ability(self, target: "Unit") -> List[BattleEvent]:
        return get_special_ability(self.kind)(self, target)
