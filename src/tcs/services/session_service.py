"""Session service running matches back to back until the player stops."""
from __future__ import annotations

import logging
from typing import Callable, List

from tcs.core.rng import RNG
from tcs.domain.events import BattleEvent
from tcs.domain.state import SessionState
from tcs.services.battle_service import BattleService
from tcs.services.controllers.battle_controller import BattleController
from tcs.services.errors import PhaseError
from tcs.services.factories import create_player

logger = logging.getLogger(__name__)

MatchRunner = Callable[[BattleController, List[BattleEvent]], None]
ContinuePrompt = Callable[[SessionState, List[BattleEvent]], bool]


class SessionService:
    """Owns the match loop: spawn, fight, level up, ask to continue."""

    def __init__(self, battle_service: BattleService | None = None) -> None:
        self._battle_service = battle_service or BattleService()

    def start_session(self, player_name: str, seed: int) -> SessionState:
        player = create_player(player_name)
        logger.debug("Session started for %s with seed %d", player.name, seed)
        return SessionState(seed=seed, rng=RNG(seed), player=player)

    def begin_match(self, state: SessionState) -> tuple[BattleController, List[BattleEvent]]:
        """Generate the encounter for the current match number."""
        if state.is_over:
            raise PhaseError("Cannot begin a match after the session has ended.")
        if not state.player.is_alive:
            raise PhaseError("Cannot begin a match with a defeated player.")
        match, events = self._battle_service.start_match(state.match_count, state.player, state.rng)
        state.current_match = match
        return BattleController(self._battle_service, match, state.rng), events

    def complete_match(self, state: SessionState) -> List[BattleEvent]:
        """Apply the between-match rules once the current match has resolved."""
        match = state.current_match
        if match is None or not match.is_over:
            raise PhaseError("The current match has not been resolved yet.")

        state.current_match = None
        if match.victor != "player":
            state.is_over = True
            logger.debug("Session over: player fell in match %d", match.match_number)
            return []

        events = state.player.gain_level()
        state.player.reset_battle_stats()
        logger.debug("%s reached level %d", state.player.name, state.player.level)
        return events

    def confirm_continue(self, state: SessionState, keep_going: bool) -> bool:
        """Record the player's post-match decision; returns True when another match follows."""
        if not keep_going or not state.player.is_alive:
            state.is_over = True
            return False
        state.match_count += 1
        return True

    def run_session(self, state: SessionState, play_match: MatchRunner, ask_continue: ContinuePrompt) -> SessionState:
        """Drive matches through the supplied callbacks until the session ends."""
        while state.player.is_alive and not state.is_over:
            controller, start_events = self.begin_match(state)
            play_match(controller, start_events)
            if not controller.is_over:
                raise PhaseError("Match runner returned before the match resolved.")
            level_events = self.complete_match(state)
            if state.is_over:
                break
            if not self.confirm_continue(state, ask_continue(state, level_events)):
                break
        return state
