"""Battle controller command surface, independent of the CLI."""
from __future__ import annotations

from typing import List

import pytest

from tcs.core.rng import RNG
from tcs.domain.battle_models import MatchState
from tcs.domain.events import ActionFailedEvent, DamageTakenEvent
from tcs.services import BattleController, BattleService
from tcs.services.controllers import parse_action_choice
from tcs.services.errors import (
    InsufficientResourceError,
    InvalidChoiceError,
    InvalidTargetError,
    PhaseError,
)
from tcs.services.factories import create_enemy_unit, create_player


def _build_controller(
    kinds: List[str] | None = None, *, phase: str = "player_action", rng: RNG | None = None
) -> BattleController:
    player = create_player("Hero")
    enemies = [create_enemy_unit(kind) for kind in (kinds or ["goblin"])]
    match = MatchState(match_number=1, player=player, enemies=enemies, phase=phase)  # type: ignore[arg-type]
    return BattleController(BattleService(), match, rng or RNG(42))


def test_controller_exposes_structured_state() -> None:
    controller = _build_controller(["goblin", "orc"])

    view = controller.get_battle_view()
    assert view.match_number == 1
    assert view.phase == "player_action"
    assert [enemy.index for enemy in view.enemies] == [1, 2]


def test_controller_provides_available_actions() -> None:
    controller = _build_controller()

    actions = controller.get_available_actions()
    assert actions["attack_damage"] == 15
    assert actions["special_damage"] == 30
    assert actions["special_cost"] == 10
    assert actions["can_use_special"] is True
    assert actions["forge_percent"] == 25
    assert actions["potion_heal"] == 25


def test_targeted_action_waits_for_target() -> None:
    controller = _build_controller()

    result = controller.select_action("1")
    assert result.status == "needs_target"
    assert controller.awaiting_target
    assert controller.pending_action == "attack"

    result = controller.select_target(1)
    assert result.succeeded
    assert any(isinstance(evt, DamageTakenEvent) for evt in result.events)
    assert controller.match.enemies[0].hp == 45
    assert controller.match.phase == "enemy_action"


def test_invalid_choice_reports_failure_and_keeps_turn() -> None:
    controller = _build_controller()

    result = controller.select_action("9")

    assert result.status == "failed"
    assert isinstance(result.error, InvalidChoiceError)
    assert isinstance(result.events[0], ActionFailedEvent)
    assert result.events[0].reason == "invalid_choice"
    assert controller.awaiting_player
    assert not controller.awaiting_target


@pytest.mark.parametrize("raw_index", ["abc", "", "5", 0])
def test_invalid_target_reports_failure_and_returns_to_menu(raw_index) -> None:
    controller = _build_controller()
    controller.select_action("attack")

    result = controller.select_target(raw_index)

    assert result.status == "failed"
    assert isinstance(result.error, InvalidTargetError)
    assert controller.match.enemies[0].hp == 60
    assert controller.awaiting_player
    assert controller.pending_action is None


def test_special_without_mana_fails_before_target_prompt() -> None:
    controller = _build_controller()
    controller.match.player.stats.mp = 0

    result = controller.select_action("2")

    assert result.status == "failed"
    assert isinstance(result.error, InsufficientResourceError)
    assert result.events[0].message == "Not enough Mana! Need 10, have 0."
    assert controller.pending_action is None
    assert controller.match.player.mp == 0
    assert controller.match.enemies[0].hp == 60
    assert controller.match.phase == "player_action"


def test_special_with_target_string_index() -> None:
    controller = _build_controller(["goblin", "orc"])

    assert controller.select_action("special").status == "needs_target"
    result = controller.select_target(" 2 ")

    assert result.succeeded
    assert controller.match.enemies[1].hp == 70


def test_untargeted_actions_complete_immediately() -> None:
    controller = _build_controller()

    result = controller.select_action("3")
    assert result.succeeded
    assert controller.match.player.attack_damage == 18

    controller.match.phase = "player_action"
    controller.match.player.stats.hp = 50
    result = controller.select_action("potion")
    assert result.succeeded
    assert controller.match.player.hp == 75


def test_select_target_without_pending_action_is_a_phase_error() -> None:
    controller = _build_controller()

    with pytest.raises(PhaseError):
        controller.select_target(1)


def test_commands_rejected_outside_player_phase() -> None:
    controller = _build_controller(phase="status_tick")

    with pytest.raises(PhaseError):
        controller.select_action("1")


def test_advance_refuses_to_skip_player_input() -> None:
    controller = _build_controller()

    with pytest.raises(PhaseError):
        controller.advance()


def test_advance_runs_automatic_phases(scripted_rng) -> None:
    controller = _build_controller(phase="status_tick", rng=scripted_rng([1]))

    assert controller.advance() == []
    assert controller.awaiting_player

    controller.select_action("1")
    controller.select_target(1)
    assert controller.match.phase == "enemy_action"

    events = controller.advance()
    assert events
    assert controller.match.player.hp == 140
    assert controller.match.phase == "status_tick"
    assert controller.match.round_number == 2


def test_parse_action_choice_accepts_numbers_and_names() -> None:
    assert parse_action_choice(" 1 ") == "attack"
    assert parse_action_choice("Special") == "special"
    assert parse_action_choice("4") == "potion"
    with pytest.raises(InvalidChoiceError):
        parse_action_choice("run")
