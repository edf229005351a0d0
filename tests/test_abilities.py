from __future__ import annotations

import pytest

from tcs.domain.abilities import get_special_ability
from tcs.domain.events import AbilityUsedEvent, BleedAppliedEvent, HealedEvent, UnitDefeatedEvent
from tcs.services.factories import create_enemy_unit, create_player


def test_holy_smite_deals_double_damage_and_heals_user() -> None:
    player = create_player("Tester")
    player.stats.hp = 100
    dragon = create_enemy_unit("dragon")

    events = player.use_special_ability(dragon)

    assert dragon.hp == 170
    assert player.hp == 110
    assert events[0] == AbilityUsedEvent(user_name="Tester", ability_name="Holy Smite", target_name="Dragon")


def test_holy_smite_heal_is_capped_at_max_health() -> None:
    player = create_player("Tester")
    dragon = create_enemy_unit("dragon")

    events = player.use_special_ability(dragon)

    heal_events = [evt for evt in events if isinstance(evt, HealedEvent)]
    assert player.hp == 150
    assert heal_events[0].amount == 0


def test_sneak_attack_adds_flat_bonus() -> None:
    player = create_player("Tester")
    goblin = create_enemy_unit("goblin")

    goblin.use_special_ability(player)

    assert player.hp == 130


def test_berserk_triples_damage_and_recoils() -> None:
    player = create_player("Tester")
    orc = create_enemy_unit("orc")

    orc.use_special_ability(player)

    assert player.hp == 114
    assert orc.hp == 95


def test_berserk_recoil_can_defeat_the_user() -> None:
    player = create_player("Tester")
    orc = create_enemy_unit("orc")
    orc.stats.hp = 5

    events = orc.use_special_ability(player)

    assert not orc.is_alive
    assert events[-1] == UnitDefeatedEvent(unit_name="Orc")


def test_feral_sweep_damages_then_applies_bleed() -> None:
    player = create_player("Tester")
    ghoul = create_enemy_unit("ghoul")

    events = ghoul.use_special_ability(player)

    assert player.hp == 135
    assert player.bleed_turns == 3
    assert isinstance(events[-1], BleedAppliedEvent)


def test_feral_sweep_resets_existing_bleed_duration() -> None:
    player = create_player("Tester")
    player.apply_bleed(1)
    ghoul = create_enemy_unit("ghoul")

    ghoul.use_special_ability(player)

    assert player.bleed_turns == 3


def test_dragons_wrath_triples_damage() -> None:
    player = create_player("Tester")
    dragon = create_enemy_unit("dragon")

    events = dragon.use_special_ability(player)

    assert player.hp == 90
    assert events[0].ability_name == "Dragon's Wrath"


def test_unknown_kind_has_no_ability() -> None:
    with pytest.raises(ValueError):
        get_special_ability("slime")  # type: ignore[arg-type]
