"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class PhaseError(RuntimeError):
    """Raised when a command is issued in a phase that cannot accept it."""


class CombatActionError(Exception):
    """Base class for recoverable failures of a player action attempt."""

    reason = "action_failed"


class InsufficientResourceError(CombatActionError):
    """Raised when an ability costs more mana than the actor has."""

    reason = "insufficient_mana"

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Not enough Mana! Need {required}, have {available}.")
        self.required = required
        self.available = available


class InvalidTargetError(CombatActionError):
    """Raised when a target index is out of range or nobody is left to target."""

    reason = "invalid_target"


class InvalidChoiceError(CombatActionError):
    """Raised for an unrecognised menu option."""

    reason = "invalid_choice"
