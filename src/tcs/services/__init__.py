"""Service layer exports."""

from .battle_service import BattleService
from .controllers import ActionResult, BattleController
from .errors import (
    CombatActionError,
    FactoryError,
    InsufficientResourceError,
    InvalidChoiceError,
    InvalidTargetError,
    PhaseError,
)
from .session_service import SessionService

__all__ = [
    "ActionResult",
    "BattleController",
    "BattleService",
    "CombatActionError",
    "FactoryError",
    "InsufficientResourceError",
    "InvalidChoiceError",
    "InvalidTargetError",
    "PhaseError",
    "SessionService",
]
