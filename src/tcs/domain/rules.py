"""Fixed combat rules shared by the turn engine and the unit model."""
from __future__ import annotations

from typing import Tuple

from tcs.core.types import EnemyKind

ABILITY_MANA_COST = 10
MANA_REGEN_PER_TURN = 5
POTION_HEAL_AMOUNT = 25
ENEMY_SPECIAL_CHANCE = 3  # one in N

BLEED_DAMAGE_PER_TURN = 10

LEVEL_UP_HP_BONUS = 20
LEVEL_UP_DAMAGE_BONUS = 3
LEVEL_UP_MANA_BONUS = 5
FORGE_DAMAGE_PERCENT = 0.25

MIN_ENEMIES_PER_MATCH = 1
MAX_ENEMIES_PER_MATCH = 3

# Cumulative percentile bands, checked in order.
SPAWN_BANDS: Tuple[Tuple[int, EnemyKind], ...] = (
    (5, "dragon"),
    (25, "ghoul"),
    (55, "orc"),
)
SPAWN_FALLBACK: EnemyKind = "goblin"


def classify_spawn_roll(roll: int) -> EnemyKind:
    """Map a percentile roll onto an enemy kind."""
    for threshold, kind in SPAWN_BANDS:
        if roll <= threshold:
            return kind
    return SPAWN_FALLBACK
