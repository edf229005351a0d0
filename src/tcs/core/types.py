"""Shared type aliases for the core and domain layers."""
from typing import Literal

UnitKind = Literal["paladin", "goblin", "orc", "ghoul", "dragon"]
EnemyKind = Literal["goblin", "orc", "ghoul", "dragon"]
PlayerActionChoice = Literal["attack", "special", "forge", "potion"]
TurnPhase = Literal["status_tick", "player_action", "enemy_action", "match_won", "match_lost"]
Victor = Literal["player", "enemies"]
TextDisplayMode = Literal["instant", "step"]

__all__ = ["EnemyKind", "PlayerActionChoice", "TextDisplayMode", "TurnPhase", "UnitKind", "Victor"]
