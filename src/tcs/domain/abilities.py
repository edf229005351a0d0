"""Special abilities, one per unit kind."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List

from tcs.core.types import UnitKind
from tcs.domain.defs import get_unit_def
from tcs.domain.events import AbilityUsedEvent, BattleEvent

if TYPE_CHECKING:
    from tcs.domain.entities.unit import Unit

SpecialAbility = Callable[["Unit", "Unit"], List[BattleEvent]]

HOLY_SMITE_MULTIPLIER = 2
HOLY_SMITE_SELF_HEAL = 10
SNEAK_ATTACK_BONUS = 10
BERSERK_MULTIPLIER = 3
BERSERK_RECOIL = 5
FERAL_SWEEP_BLEED_TURNS = 3
DRAGONS_WRATH_MULTIPLIER = 3


def _announce(user: "Unit", target: "Unit") -> List[BattleEvent]:
    ability_name = get_unit_def(user.kind).ability_name
    return [AbilityUsedEvent(user_name=user.name, ability_name=ability_name, target_name=target.name)]


def holy_smite(user: "Unit", target: "Unit") -> List[BattleEvent]:
    events = _announce(user, target)
    events.extend(target.take_damage(user.stats.attack * HOLY_SMITE_MULTIPLIER))
    events.extend(user.heal(HOLY_SMITE_SELF_HEAL))
    return events


def sneak_attack(user: "Unit", target: "Unit") -> List[BattleEvent]:
    events = _announce(user, target)
    events.extend(target.take_damage(user.stats.attack + SNEAK_ATTACK_BONUS))
    return events


def berserk(user: "Unit", target: "Unit") -> List[BattleEvent]:
    events = _announce(user, target)
    events.extend(target.take_damage(user.stats.attack * BERSERK_MULTIPLIER))
    events.extend(user.take_damage(BERSERK_RECOIL))
    return events


def feral_sweep(user: "Unit", target: "Unit") -> List[BattleEvent]:
    events = _announce(user, target)
    events.extend(target.take_damage(user.stats.attack))
    events.extend(target.apply_bleed(FERAL_SWEEP_BLEED_TURNS))
    return events


def dragons_wrath(user: "Unit", target: "Unit") -> List[BattleEvent]:
    events = _announce(user, target)
    events.extend(target.take_damage(user.stats.attack * DRAGONS_WRATH_MULTIPLIER))
    return events


SPECIAL_ABILITIES: Dict[UnitKind, SpecialAbility] = {
    "paladin": holy_smite,
    "goblin": sneak_attack,
    "orc": berserk,
    "ghoul": feral_sweep,
    "dragon": dragons_wrath,
}


def get_special_ability(kind: UnitKind) -> SpecialAbility:
    try:
        return SPECIAL_ABILITIES[kind]
    except KeyError as exc:
        raise ValueError(f"No special ability registered for unit kind '{kind}'.") from exc
