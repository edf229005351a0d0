"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import time
from typing import Iterable, List, Sequence

from colorama import Fore, Style

from tcs.core.types import TextDisplayMode
from tcs.domain.battle_models import BattleView, CombatantView
from tcs.domain.events import (
    AbilityUsedEvent,
    ActionFailedEvent,
    AttackEvent,
    BattleEvent,
    BleedAppliedEvent,
    BleedTickEvent,
    DamageTakenEvent,
    HealedEvent,
    LevelGainedEvent,
    ManaRegeneratedEvent,
    ManaSpentEvent,
    MatchResolvedEvent,
    MatchStartedEvent,
    UnitDefeatedEvent,
    WeaponForgedEvent,
)

HEALTH_BAR_LENGTH = 20
HIGH_HEALTH_PERCENT = 70
MID_HEALTH_PERCENT = 36
BANNER_WIDTH = 46

_color_enabled = True
_text_display_mode: TextDisplayMode = "instant"
_action_delay = 0.0


def debug_enabled() -> bool:
    """Return True only when TCS_DEBUG is explicitly set to '1'."""
    return os.getenv("TCS_DEBUG") == "1"


def set_color_enabled(enabled: bool) -> None:
    global _color_enabled
    _color_enabled = enabled and not os.getenv("NO_COLOR")


def set_text_display_mode(mode: str) -> None:
    global _text_display_mode
    _text_display_mode = "step" if mode == "step" else "instant"


def set_action_delay(seconds: float) -> None:
    global _action_delay
    _action_delay = max(0.0, seconds)


def colorize(text: str, color: str) -> str:
    if not _color_enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def pause() -> None:
    """Wait for Enter in step mode; return immediately in instant mode."""
    if _text_display_mode == "step":
        input("\nPress enter to continue...")


def action_pause() -> None:
    if _action_delay > 0:
        time.sleep(_action_delay)


# -----------------------
# Status panel
# -----------------------
def health_bar(current: int, maximum: int, length: int = HEALTH_BAR_LENGTH) -> str:
    """Return a fixed-width '#'/'-' bar for the given health ratio."""
    ratio = current / maximum if maximum > 0 else 0.0
    filled = min(length, max(0, round(ratio * length)))
    return f"[{'#' * filled}{'-' * (length - filled)}]"


def health_color(current: int, maximum: int) -> str:
    percentage = current / maximum * 100 if maximum > 0 else 0.0
    if percentage >= HIGH_HEALTH_PERCENT:
        return Fore.GREEN
    if percentage >= MID_HEALTH_PERCENT:
        return Fore.YELLOW
    return Fore.RED


def format_combatant_line(view: CombatantView) -> str:
    prefix = f"[{view.index}] " if view.index is not None else ""
    health = f"{prefix}{view.name}: {health_bar(view.current_hp, view.max_hp)} ({view.current_hp}/{view.max_hp})"
    line = colorize(health, health_color(view.current_hp, view.max_hp))
    line += " " + colorize(f"[MP: {view.current_mp}/{view.max_mp}]", Fore.CYAN)
    if view.is_bleeding:
        line += " " + colorize("[BLEEDING]", Fore.RED)
    if debug_enabled():
        line += f" (DEBUG atk {view.attack})"
    return line


def render_banner(lines: Sequence[str]) -> None:
    print("=" * BANNER_WIDTH)
    for line in lines:
        print(line.center(BANNER_WIDTH).rstrip())
    print("=" * BANNER_WIDTH)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n----- {title} " + "-" * max(0, BANNER_WIDTH - len(title) - 7))


def render_battle_view(view: BattleView) -> None:
    render_heading("MATCH STATUS")
    print(f"(Level {view.player.level}) {format_combatant_line(view.player)}")
    render_heading("ENEMIES")
    for enemy in view.enemies:
        print(format_combatant_line(enemy))
    print("-" * BANNER_WIDTH)


def render_target_list(enemies: Iterable[CombatantView]) -> None:
    print("Select Your Target:")
    print("-" * 33)
    for enemy in enemies:
        print(format_combatant_line(enemy))
    print("-" * 33)


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}: {label}")


# -----------------------
# Events
# -----------------------
def format_event(event: BattleEvent) -> str:
    """Return the display line for ``event``."""
    if isinstance(event, MatchStartedEvent):
        return f"A group of enemies approaches {event.player_name}: {', '.join(event.enemy_names)}!"
    if isinstance(event, AttackEvent):
        return f"{event.attacker_name} attacks {event.target_name}!"
    if isinstance(event, AbilityUsedEvent):
        return colorize(f"{event.user_name} uses {event.ability_name} on {event.target_name}!", Fore.MAGENTA)
    if isinstance(event, DamageTakenEvent):
        return f"{event.unit_name} takes {event.amount} damage! Remaining Health: {event.hp}/{event.max_hp}"
    if isinstance(event, UnitDefeatedEvent):
        return colorize(f"*** {event.unit_name} has been defeated! ***", Fore.RED)
    if isinstance(event, HealedEvent):
        return colorize(f"{event.unit_name} heals for {event.amount} HP. ({event.hp}/{event.max_hp})", Fore.GREEN)
    if isinstance(event, ManaSpentEvent):
        return colorize(f"! [{event.unit_name} uses {event.amount} Mana]", Fore.CYAN)
    if isinstance(event, ManaRegeneratedEvent):
        return colorize(
            f"   + {event.unit_name} regenerates {event.amount} Mana. (Total: {event.mp}/{event.max_mp})",
            Fore.BLUE,
        )
    if isinstance(event, BleedAppliedEvent):
        return colorize(f"{event.unit_name} is bleeding! Takes damage for next {event.turns} turns.", Fore.RED)
    if isinstance(event, BleedTickEvent):
        return colorize(f"[BLEED] {event.unit_name} loses blood! (-{event.damage} HP)", Fore.RED)
    if isinstance(event, WeaponForgedEvent):
        return colorize(
            f"{event.unit_name} sharpens their blade! Damage increased by {event.bonus} for this match.",
            Fore.CYAN,
        )
    if isinstance(event, LevelGainedEvent):
        return colorize(
            f"*** LEVEL UP! {event.unit_name} has reached Level {event.level}! ***\n"
            f"Max HP +{event.hp_bonus}, Max Mana +{event.mana_bonus}, Base Dmg +{event.damage_bonus}.",
            Fore.GREEN,
        )
    if isinstance(event, ActionFailedEvent):
        return colorize(event.message, Fore.RED)
    if isinstance(event, MatchResolvedEvent):
        if event.victor == "player":
            return colorize(f"Match {event.match_number} won!", Fore.GREEN)
        return colorize(f"Match {event.match_number} lost.", Fore.RED)
    return f"{event}"


def format_events(events: Iterable[BattleEvent]) -> List[str]:
    return [format_event(event) for event in events]


def render_events(events: Iterable[BattleEvent]) -> None:
    for line in format_events(events):
        print(line)
