"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tcs.core.types import TurnPhase, UnitKind, Victor
from tcs.domain.entities import Player, Unit

TERMINAL_PHASES: tuple[TurnPhase, ...] = ("match_won", "match_lost")


@dataclass(slots=True)
class MatchState:
    """Tracks the state of an ongoing match."""

    match_number: int
    player: Player
    enemies: List[Unit]
    phase: TurnPhase = "status_tick"
    round_number: int = 1
    victor: Victor | None = None

    @property
    def is_over(self) -> bool:
        return self.phase in TERMINAL_PHASES

    def living_enemies(self) -> List[Unit]:
        return [enemy for enemy in self.enemies if enemy.is_alive]


@dataclass(slots=True)
class CombatantView:
    """Read-only snapshot of a unit for rendering."""

    name: str
    kind: UnitKind
    level: int
    current_hp: int
    max_hp: int
    current_mp: int
    max_mp: int
    attack: int
    is_alive: bool
    is_bleeding: bool
    index: int | None = None  # 1-based target index for living enemies


@dataclass(slots=True)
class BattleView:
    """Presentation view for the current match."""

    match_number: int
    round_number: int
    phase: TurnPhase
    player: CombatantView
    enemies: List[CombatantView] = field(default_factory=list)
