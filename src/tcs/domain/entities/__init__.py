"""Runtime entity exports."""

from .player import Player
from .stats import Stats
from .unit import Unit

__all__ = [
    "Player",
    "Stats",
    "Unit",
]
