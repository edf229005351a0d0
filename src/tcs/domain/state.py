"""Domain-level session state."""
from __future__ import annotations

from dataclasses import dataclass

from tcs.core.rng import RNG
from tcs.domain.battle_models import MatchState
from tcs.domain.entities import Player


@dataclass
class SessionState:
    """Owns the player and the match currently being played."""

    seed: int
    rng: RNG
    player: Player
    match_count: int = 1
    current_match: MatchState | None = None
    is_over: bool = False
