"""Definition exports."""

from .unit_def import UNIT_DEFS, UnitDef, get_unit_def

__all__ = ["UNIT_DEFS", "UnitDef", "get_unit_def"]
