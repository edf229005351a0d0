"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .battle_controller import ACTION_MENU, ActionResult, ActionStatus, BattleController, parse_action_choice

__all__ = [
    "ACTION_MENU",
    "ActionResult",
    "ActionStatus",
    "BattleController",
    "parse_action_choice",
]
