"""Factory for creating enemy units and match encounters."""
from __future__ import annotations

import logging
from typing import List

from tcs.core.rng import RNG
from tcs.domain.defs import get_unit_def
from tcs.domain.entities import Stats, Unit
from tcs.domain.rules import MAX_ENEMIES_PER_MATCH, MIN_ENEMIES_PER_MATCH, classify_spawn_roll
from tcs.services.errors import FactoryError

from .id_factory import FIRST_MATCH_ENEMY_NAME, make_enemy_name

logger = logging.getLogger(__name__)


def create_enemy_unit(kind: str, name: str | None = None) -> Unit:
    """Instantiate an enemy of ``kind`` at full health and mana."""
    try:
        unit_def = get_unit_def(kind)
    except KeyError as exc:
        raise FactoryError(f"Unit kind '{kind}' not found.") from exc
    if unit_def.kind == "paladin":
        raise FactoryError("The paladin is player-only and cannot be spawned as an enemy.")

    stats = Stats.full(max_hp=unit_def.max_hp, max_mp=unit_def.max_mp, attack=unit_def.attack)
    return Unit(name=name or unit_def.name, kind=unit_def.kind, stats=stats)


def generate_encounter(match_number: int, rng: RNG) -> List[Unit]:
    """Roll the enemy roster for a match.

    The first match is always a single goblin. Later matches draw one to
    three enemies, each classified independently by a percentile roll.
    """
    if match_number < 1:
        raise FactoryError(f"Match numbers start at 1, got {match_number}.")

    if match_number == 1:
        enemies = [create_enemy_unit("goblin", FIRST_MATCH_ENEMY_NAME)]
    else:
        count = rng.randint(MIN_ENEMIES_PER_MATCH, MAX_ENEMIES_PER_MATCH)
        enemies = []
        for slot in range(1, count + 1):
            roll = rng.percentile()
            kind = classify_spawn_roll(roll)
            logger.debug("Match %d slot %d rolled %d -> %s", match_number, slot, roll, kind)
            enemies.append(create_enemy_unit(kind, make_enemy_name(get_unit_def(kind), slot)))

    logger.debug("Generated encounter for match %d: %s", match_number, [enemy.name for enemy in enemies])
    return enemies
