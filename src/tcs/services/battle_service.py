"""Battle service implementing the turn engine rules."""
from __future__ import annotations

import logging
from typing import List

from tcs.core.rng import RNG
from tcs.core.types import TurnPhase, Victor
from tcs.domain.battle_models import BattleView, CombatantView, MatchState
from tcs.domain.entities import Player, Unit
from tcs.domain.events import (
    BattleEvent,
    ManaRegeneratedEvent,
    ManaSpentEvent,
    MatchResolvedEvent,
    MatchStartedEvent,
)
from tcs.domain.rules import (
    ABILITY_MANA_COST,
    ENEMY_SPECIAL_CHANCE,
    MANA_REGEN_PER_TURN,
    POTION_HEAL_AMOUNT,
)
from tcs.services.errors import InsufficientResourceError, InvalidTargetError, PhaseError
from tcs.services.factories import generate_encounter

logger = logging.getLogger(__name__)


class BattleService:
    """Deterministic turn engine for a single match.

    Each public step checks that the match is in the phase it expects,
    mutates the units, moves the match to its next phase and returns the
    events produced along the way.
    """

    # -----------------------
    # Match Lifecycle
    # -----------------------
    def start_match(self, match_number: int, player: Player, rng: RNG) -> tuple[MatchState, List[BattleEvent]]:
        """Spawn the encounter for ``match_number`` and open the first round."""
        enemies = generate_encounter(match_number, rng)
        match = MatchState(match_number=match_number, player=player, enemies=enemies)
        events: List[BattleEvent] = [
            MatchStartedEvent(
                match_number=match_number,
                player_name=player.name,
                enemy_names=[enemy.name for enemy in enemies],
            )
        ]
        logger.debug("Match %d started against %d enemies", match_number, len(enemies))
        return match, events

    def get_battle_view(self, match: MatchState) -> BattleView:
        """Return structured information for rendering."""
        return BattleView(
            match_number=match.match_number,
            round_number=match.round_number,
            phase=match.phase,
            player=self._to_view(match.player),
            enemies=[self._to_view(enemy, index=idx) for idx, enemy in enumerate(match.living_enemies(), start=1)],
        )

    # -----------------------
    # Status Tick
    # -----------------------
    def process_status_tick(self, match: MatchState) -> List[BattleEvent]:
        self._require_phase(match, "status_tick")
        events: List[BattleEvent] = list(match.player.process_status_effects())
        if not match.player.is_alive:
            events.append(self._resolve(match, "enemies"))
            return events

        for enemy in match.living_enemies():
            events.extend(enemy.process_status_effects())
            if not match.player.is_alive:
                events.append(self._resolve(match, "enemies"))
                return events

        if not match.living_enemies():
            events.append(self._resolve(match, "player"))
            return events

        self._set_phase(match, "player_action")
        return events

    # -----------------------
    # Player Actions
    # -----------------------
    def resolve_target(self, match: MatchState, target_index: int) -> Unit:
        """Return the living enemy at the 1-based ``target_index``."""
        living = match.living_enemies()
        if not living:
            raise InvalidTargetError("There are no enemies left to target.")
        if not 1 <= target_index <= len(living):
            raise InvalidTargetError(f"Invalid target selection. Choose 1-{len(living)}.")
        return living[target_index - 1]

    def ensure_special_affordable(self, match: MatchState) -> None:
        player = match.player
        if player.mp < ABILITY_MANA_COST:
            raise InsufficientResourceError(required=ABILITY_MANA_COST, available=player.mp)

    def player_attack(self, match: MatchState, target_index: int) -> List[BattleEvent]:
        self._require_phase(match, "player_action")
        target = self.resolve_target(match, target_index)
        events = match.player.attack(target)
        return self._finish_player_action(match, events)

    def player_special(self, match: MatchState, target_index: int) -> List[BattleEvent]:
        self._require_phase(match, "player_action")
        self.ensure_special_affordable(match)
        target = self.resolve_target(match, target_index)

        player = match.player
        player.consume_mana(ABILITY_MANA_COST)
        events: List[BattleEvent] = [
            ManaSpentEvent(unit_name=player.name, amount=ABILITY_MANA_COST, mp=player.mp, max_mp=player.max_mp)
        ]
        events.extend(player.use_special_ability(target))
        return self._finish_player_action(match, events)

    def player_forge(self, match: MatchState) -> List[BattleEvent]:
        self._require_phase(match, "player_action")
        events = match.player.forge_weapon()
        return self._finish_player_action(match, events)

    def player_potion(self, match: MatchState) -> List[BattleEvent]:
        self._require_phase(match, "player_action")
        events = match.player.heal(POTION_HEAL_AMOUNT)
        return self._finish_player_action(match, events)

    # -----------------------
    # Enemy AI
    # -----------------------
    def run_enemy_phase(self, match: MatchState, rng: RNG) -> List[BattleEvent]:
        self._require_phase(match, "enemy_action")
        player = match.player
        events: List[BattleEvent] = []
        for enemy in match.living_enemies():
            if not player.is_alive:
                break
            if not enemy.is_alive:
                continue
            events.extend(self._run_enemy_turn(enemy, player, rng))

        if not player.is_alive:
            events.append(self._resolve(match, "enemies"))
            return events
        if not match.living_enemies():
            events.append(self._resolve(match, "player"))
            return events

        match.round_number += 1
        self._set_phase(match, "status_tick")
        return events

    def _run_enemy_turn(self, enemy: Unit, player: Player, rng: RNG) -> List[BattleEvent]:
        if rng.one_in(ENEMY_SPECIAL_CHANCE) and enemy.consume_mana(ABILITY_MANA_COST):
            events: List[BattleEvent] = [
                ManaSpentEvent(unit_name=enemy.name, amount=ABILITY_MANA_COST, mp=enemy.mp, max_mp=enemy.max_mp)
            ]
            events.extend(enemy.use_special_ability(player))
            return events

        events = enemy.attack(player)
        events.extend(self._regenerate(enemy))
        return events

    # -----------------------
    # Helpers
    # -----------------------
    def _finish_player_action(self, match: MatchState, events: List[BattleEvent]) -> List[BattleEvent]:
        events.extend(self._regenerate(match.player))
        if not match.player.is_alive:
            events.append(self._resolve(match, "enemies"))
            return events

        self._clean_up_enemies(match)
        if not match.enemies:
            events.append(self._resolve(match, "player"))
            return events

        self._set_phase(match, "enemy_action")
        return events

    def _clean_up_enemies(self, match: MatchState) -> None:
        match.enemies[:] = [enemy for enemy in match.enemies if enemy.is_alive]

    def _regenerate(self, unit: Unit) -> List[BattleEvent]:
        gained = unit.regenerate_mana(MANA_REGEN_PER_TURN)
        if gained <= 0:
            return []
        return [ManaRegeneratedEvent(unit_name=unit.name, amount=gained, mp=unit.mp, max_mp=unit.max_mp)]

    def _resolve(self, match: MatchState, victor: Victor) -> MatchResolvedEvent:
        match.victor = victor
        self._set_phase(match, "match_won" if victor == "player" else "match_lost")
        return MatchResolvedEvent(match_number=match.match_number, victor=victor)

    def _set_phase(self, match: MatchState, phase: TurnPhase) -> None:
        logger.debug("Match %d round %d: %s -> %s", match.match_number, match.round_number, match.phase, phase)
        match.phase = phase

    def _require_phase(self, match: MatchState, expected: TurnPhase) -> None:
        if match.phase != expected:
            raise PhaseError(f"Expected phase '{expected}', match is in '{match.phase}'.")

    def _to_view(self, unit: Unit, *, index: int | None = None) -> CombatantView:
        return CombatantView(
            name=unit.name,
            kind=unit.kind,
            level=unit.level,
            current_hp=unit.hp,
            max_hp=unit.max_hp,
            current_mp=unit.mp,
            max_mp=unit.max_mp,
            attack=unit.attack_damage,
            is_alive=unit.is_alive,
            is_bleeding=unit.is_bleeding,
            index=index,
        )
