"""Combat events emitted by the core for the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from tcs.core.types import Victor


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class MatchStartedEvent(BattleEvent):
    match_number: int
    player_name: str
    enemy_names: List[str]


@dataclass(slots=True)
class AttackEvent(BattleEvent):
    attacker_name: str
    target_name: str


@dataclass(slots=True)
class AbilityUsedEvent(BattleEvent):
    user_name: str
    ability_name: str
    target_name: str


@dataclass(slots=True)
class DamageTakenEvent(BattleEvent):
    unit_name: str
    amount: int
    hp: int
    max_hp: int


@dataclass(slots=True)
class UnitDefeatedEvent(BattleEvent):
    unit_name: str


@dataclass(slots=True)
class HealedEvent(BattleEvent):
    unit_name: str
    amount: int
    hp: int
    max_hp: int


@dataclass(slots=True)
class ManaSpentEvent(BattleEvent):
    unit_name: str
    amount: int
    mp: int
    max_mp: int


@dataclass(slots=True)
class ManaRegeneratedEvent(BattleEvent):
    unit_name: str
    amount: int
    mp: int
    max_mp: int


@dataclass(slots=True)
class BleedAppliedEvent(BattleEvent):
    unit_name: str
    turns: int


@dataclass(slots=True)
class BleedTickEvent(BattleEvent):
    unit_name: str
    damage: int
    turns_remaining: int


@dataclass(slots=True)
class WeaponForgedEvent(BattleEvent):
    unit_name: str
    bonus: int
    attack: int


@dataclass(slots=True)
class LevelGainedEvent(BattleEvent):
    unit_name: str
    level: int
    hp_bonus: int
    mana_bonus: int
    damage_bonus: int


@dataclass(slots=True)
class ActionFailedEvent(BattleEvent):
    actor_name: str
    reason: str
    message: str


@dataclass(slots=True)
class MatchResolvedEvent(BattleEvent):
    match_number: int
    victor: Victor


__all__ = [
    "AbilityUsedEvent",
    "ActionFailedEvent",
    "AttackEvent",
    "BattleEvent",
    "BleedAppliedEvent",
    "BleedTickEvent",
    "DamageTakenEvent",
    "HealedEvent",
    "LevelGainedEvent",
    "ManaRegeneratedEvent",
    "ManaSpentEvent",
    "MatchResolvedEvent",
    "MatchStartedEvent",
    "UnitDefeatedEvent",
    "WeaponForgedEvent",
]
