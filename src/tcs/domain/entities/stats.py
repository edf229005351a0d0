"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Stores basic combat stats."""

    max_hp: int
    hp: int
    max_mp: int
    mp: int
    attack: int

    @classmethod
    def full(cls, *, max_hp: int, max_mp: int, attack: int) -> "Stats":
        """Build stats with health and mana at their maxima."""
        return cls(max_hp=max_hp, hp=max_hp, max_mp=max_mp, mp=max_mp, attack=attack)
