"""Console-driven UI loops for the combat simulator."""
from __future__ import annotations

import secrets
from pathlib import Path
from typing import List

from colorama import Fore, just_fix_windows_console

from tcs.domain.events import BattleEvent
from tcs.domain.state import SessionState
from tcs.presentation.cli.config import load_config
from tcs.presentation.cli.render import (
    action_pause,
    colorize,
    pause,
    render_banner,
    render_battle_view,
    render_events,
    render_menu,
    render_target_list,
    set_action_delay,
    set_color_enabled,
    set_text_display_mode,
)
from tcs.services import BattleController, SessionService

_MAX_RANDOM_SEED = 2**31 - 1


def main(
    *,
    seed: int | None = None,
    player_name: str | None = None,
    config_path: Path | None = None,
) -> None:
    """Start the interactive CLI session."""
    just_fix_windows_console()
    _apply_config(config_path)
    session_service = SessionService()

    render_banner(["TEXT COMBAT SIM"])
    name = player_name if player_name is not None else _prompt_player_name()
    chosen_seed = seed if seed is not None else _prompt_seed()
    state = session_service.start_session(name, chosen_seed)
    print(f"Game started with seed: {chosen_seed}")

    session_service.run_session(state, _run_match, _post_match_menu)
    _render_end_screen(state)


def _apply_config(config_path: Path | None) -> None:
    config = load_config(config_path)
    set_text_display_mode(config["text_display_mode"])
    set_action_delay(config["action_delay"])
    set_color_enabled(config["color"])


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_player_name() -> str:
    print("\nInput your username:")
    return input(">> ").strip()


def _run_match(controller: BattleController, start_events: List[BattleEvent]) -> None:
    """Drive one match through its phases until it resolves."""
    print(f"\n====== MATCH {controller.match.match_number} START ======")
    render_events(start_events)
    pause()
    while not controller.is_over:
        phase = controller.match.phase
        if phase == "status_tick":
            render_battle_view(controller.get_battle_view())
            render_events(controller.advance())
        elif phase == "player_action":
            _player_turn(controller)
        else:
            print("\n--- ENEMY TURN ---")
            action_pause()
            render_events(controller.advance())
            pause()


def _player_turn(controller: BattleController) -> None:
    actions = controller.get_available_actions()
    render_menu(
        "YOUR TURN",
        [
            f"Standard Attack [Deals {actions['attack_damage']} dmg]",
            f"Holy Smite (Special) [Cost: {actions['special_cost']} MP | Deals {actions['special_damage']} dmg]",
            f"Forge Weapon [Adds {actions['forge_percent']}% extra dmg]",
            f"Drink Potion [Heals {actions['potion_heal']} HP]",
        ],
    )
    result = controller.select_action(input(">> "))
    if result.status == "needs_target":
        render_target_list(controller.get_battle_view().enemies)
        result = controller.select_target(input(">> "))
    if result.succeeded:
        action_pause()
    render_events(result.events)
    pause()


def _post_match_menu(state: SessionState, level_events: List[BattleEvent]) -> bool:
    print()
    render_banner([f"MATCH {state.match_count} COMPLETE"])
    render_events(level_events)
    pause()
    print()
    render_banner(["PREPARE FOR BATTLE"])
    render_menu("NEXT", ["Find a new match!", "Exit Game"])
    return input(">> ").strip() == "1"


def _render_end_screen(state: SessionState) -> None:
    print()
    if state.player.is_alive:
        render_banner([colorize("YOU HAVE RETIRED FROM COMBAT", Fore.GREEN)])
    else:
        render_banner([colorize("DEFEAT! GAME OVER.", Fore.RED)])
    print(f"Matches played: {state.match_count} | Final level: {state.player.level}")
