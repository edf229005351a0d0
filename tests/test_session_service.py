from __future__ import annotations

from typing import List

import pytest

from tcs.domain.events import BattleEvent, LevelGainedEvent
from tcs.domain.state import SessionState
from tcs.services import BattleController, SessionService
from tcs.services.errors import PhaseError


def _win_match(controller: BattleController, start_events: List[BattleEvent]) -> None:
    """Weaken every enemy to one harmless hit point and fight until the match resolves."""
    del start_events
    for enemy in controller.match.enemies:
        enemy.stats.hp = 1
        enemy.stats.attack = 0
    while not controller.is_over:
        if controller.awaiting_player:
            controller.select_action("1")
            controller.select_target(1)
        else:
            controller.advance()


def _lose_match(controller: BattleController, start_events: List[BattleEvent]) -> None:
    del start_events
    controller.match.player.stats.hp = 10
    controller.match.player.apply_bleed(1)
    controller.advance()


def test_start_session_defaults() -> None:
    service = SessionService()
    state = service.start_session("", seed=5)

    assert state.player.name == "Hero"
    assert state.match_count == 1
    assert state.current_match is None
    assert not state.is_over


def test_first_match_is_single_goblin() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=5)

    controller, events = service.begin_match(state)

    assert state.current_match is controller.match
    assert [enemy.name for enemy in controller.match.enemies] == ["Goblin Scavenger"]
    assert events[0].enemy_names == ["Goblin Scavenger"]


def test_complete_won_match_levels_up_and_resets() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=5)
    controller, _ = service.begin_match(state)
    controller.match.enemies[0].stats.hp = 15

    controller.advance()
    controller.select_action("3")
    controller.match.phase = "player_action"
    controller.select_action("1")
    controller.select_target(1)
    assert controller.match.phase == "match_won"

    events = service.complete_match(state)

    assert isinstance(events[0], LevelGainedEvent)
    assert state.player.level == 2
    assert state.player.attack_damage == 18
    assert state.player.hp == 170
    assert state.current_match is None


def test_complete_match_requires_resolution() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=5)
    service.begin_match(state)

    with pytest.raises(PhaseError):
        service.complete_match(state)


def test_lost_match_ends_session() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=5)
    controller, _ = service.begin_match(state)
    _lose_match(controller, [])

    assert service.complete_match(state) == []
    assert state.is_over
    with pytest.raises(PhaseError):
        service.begin_match(state)


def test_confirm_continue_advances_match_count() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=5)

    assert service.confirm_continue(state, True) is True
    assert state.match_count == 2
    assert service.confirm_continue(state, False) is False
    assert state.match_count == 2
    assert state.is_over


def test_confirm_continue_refuses_when_player_is_dead() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=5)
    state.player.stats.hp = 0

    assert service.confirm_continue(state, True) is False
    assert state.is_over


def test_run_session_until_player_retires() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=11)
    answers = iter([True, True, False])

    def ask_continue(session: SessionState, level_events: List[BattleEvent]) -> bool:
        assert isinstance(level_events[0], LevelGainedEvent)
        return next(answers)

    service.run_session(state, _win_match, ask_continue)

    assert state.is_over
    assert state.player.is_alive
    assert state.match_count == 3
    assert state.player.level == 4


def test_run_session_stops_on_defeat_without_prompt() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=11)

    def ask_continue(session: SessionState, level_events: List[BattleEvent]) -> bool:
        raise AssertionError("should not be asked after a defeat")

    service.run_session(state, _lose_match, ask_continue)

    assert state.is_over
    assert not state.player.is_alive
    assert state.match_count == 1


def test_run_session_rejects_unfinished_match_runner() -> None:
    service = SessionService()
    state = service.start_session("Tess", seed=11)

    with pytest.raises(PhaseError):
        service.run_session(state, lambda controller, events: None, lambda session, events: False)


def test_same_seed_spawns_same_encounters() -> None:
    service = SessionService()
    names = []
    for _ in range(2):
        state = service.start_session("Tess", seed=2024)
        state.match_count = 2
        controller, _ = service.begin_match(state)
        names.append([enemy.name for enemy in controller.match.enemies])

    assert names[0] == names[1]
