"""UI-agnostic battle controller that separates state progression from rendering."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Literal

from tcs.core.rng import RNG
from tcs.core.types import PlayerActionChoice
from tcs.domain.abilities import HOLY_SMITE_MULTIPLIER
from tcs.domain.battle_models import BattleView, MatchState
from tcs.domain.events import ActionFailedEvent, BattleEvent
from tcs.domain.rules import ABILITY_MANA_COST, FORGE_DAMAGE_PERCENT, POTION_HEAL_AMOUNT
from tcs.services.battle_service import BattleService
from tcs.services.errors import CombatActionError, InvalidChoiceError, InvalidTargetError, PhaseError

logger = logging.getLogger(__name__)

ActionStatus = Literal["done", "needs_target", "failed"]

ACTION_MENU: Dict[str, PlayerActionChoice] = {
    "1": "attack",
    "2": "special",
    "3": "forge",
    "4": "potion",
}
_TARGETED_ACTIONS: tuple[PlayerActionChoice, ...] = ("attack", "special")


@dataclass(slots=True)
class ActionResult:
    """Outcome of a player command."""

    status: ActionStatus
    events: List[BattleEvent] = field(default_factory=list)
    error: CombatActionError | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == "done"


def parse_action_choice(raw: str) -> PlayerActionChoice:
    """Map menu input (number or action name) onto an action."""
    cleaned = raw.strip().lower()
    if cleaned in ACTION_MENU:
        return ACTION_MENU[cleaned]
    if cleaned in ACTION_MENU.values():
        return cleaned  # type: ignore[return-value]
    raise InvalidChoiceError("Invalid choice.")


class BattleController:
    """
    UI-agnostic controller for match state progression.

    This controller wraps BattleService and exposes only structured state and
    commands. It does NOT handle rendering, formatting, or input prompts.

    Responsibilities:
    - Validate raw action and target input from the presentation layer
    - Report recoverable failures as results instead of raising
    - Run automatic phases (status ticks, enemy turns) on request

    Non-responsibilities (handled by presentation layer):
    - Rendering state panels or events
    - Prompting for user input and pacing
    """

    def __init__(self, battle_service: BattleService, match: MatchState, rng: RNG) -> None:
        self._service = battle_service
        self._match = match
        self._rng = rng
        self._pending: PlayerActionChoice | None = None

    @property
    def match(self) -> MatchState:
        return self._match

    @property
    def is_over(self) -> bool:
        return self._match.is_over

    @property
    def awaiting_player(self) -> bool:
        return self._match.phase == "player_action"

    @property
    def awaiting_target(self) -> bool:
        return self.awaiting_player and self._pending is not None

    @property
    def pending_action(self) -> PlayerActionChoice | None:
        return self._pending

    def get_battle_view(self) -> BattleView:
        """Return structured view of current match state for rendering."""
        return self._service.get_battle_view(self._match)

    def get_available_actions(self) -> dict:
        """
        Return structured data about the player's action menu.

        Returns a dict with:
        - attack_damage: int
        - special_damage: int
        - special_cost: int
        - can_use_special: bool
        - forge_percent: int
        - potion_heal: int
        """
        player = self._match.player
        return {
            "attack_damage": player.attack_damage,
            "special_damage": player.attack_damage * HOLY_SMITE_MULTIPLIER,
            "special_cost": ABILITY_MANA_COST,
            "can_use_special": player.mp >= ABILITY_MANA_COST,
            "forge_percent": int(FORGE_DAMAGE_PERCENT * 100),
            "potion_heal": POTION_HEAL_AMOUNT,
        }

    # -----------------------
    # Commands
    # -----------------------
    def advance(self) -> List[BattleEvent]:
        """Run the current automatic phase and return its events."""
        phase = self._match.phase
        if phase == "status_tick":
            return self._service.process_status_tick(self._match)
        if phase == "enemy_action":
            return self._service.run_enemy_phase(self._match, self._rng)
        raise PhaseError(f"Phase '{phase}' does not advance on its own.")

    def select_action(self, choice: str) -> ActionResult:
        """Choose an action from the menu; targeted actions wait for select_target."""
        self._require_player_phase()
        self._pending = None
        try:
            action = parse_action_choice(choice)
            if action == "special":
                self._service.ensure_special_affordable(self._match)
            if action in _TARGETED_ACTIONS:
                if not self._match.living_enemies():
                    raise InvalidTargetError("There are no enemies left to target.")
                self._pending = action
                return ActionResult(status="needs_target")
            if action == "forge":
                events = self._service.player_forge(self._match)
            else:
                events = self._service.player_potion(self._match)
        except CombatActionError as exc:
            return self._failed(exc)
        return ActionResult(status="done", events=events)

    def select_target(self, index: int | str) -> ActionResult:
        """Resolve the pending targeted action against the 1-based living-enemy index."""
        self._require_player_phase()
        action = self._pending
        if action is None:
            raise PhaseError("No targeted action is waiting for a target.")
        self._pending = None
        try:
            target_index = self._parse_index(index)
            if action == "attack":
                events = self._service.player_attack(self._match, target_index)
            else:
                events = self._service.player_special(self._match, target_index)
        except CombatActionError as exc:
            return self._failed(exc)
        return ActionResult(status="done", events=events)

    # -----------------------
    # Helpers
    # -----------------------
    def _parse_index(self, index: int | str) -> int:
        if isinstance(index, int):
            return index
        try:
            return int(index.strip())
        except ValueError as exc:
            raise InvalidTargetError("Invalid target selection.") from exc

    def _failed(self, exc: CombatActionError) -> ActionResult:
        logger.debug("Player action rejected: %s", exc)
        event = ActionFailedEvent(actor_name=self._match.player.name, reason=exc.reason, message=str(exc))
        return ActionResult(status="failed", events=[event], error=exc)

    def _require_player_phase(self) -> None:
        if not self.awaiting_player:
            raise PhaseError(f"Player commands are not accepted during '{self._match.phase}'.")
