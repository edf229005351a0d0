"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

_DEFAULT_TEXT_MODE = "instant"
_DEFAULT_ACTION_DELAY = 0.0
_MAX_ACTION_DELAY = 5.0


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "TextCombatSim"
        return Path.home() / "TextCombatSim"
    return Path.home() / ".config" / "text_combat_sim"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {
        "text_display_mode": _DEFAULT_TEXT_MODE,
        "action_delay": _DEFAULT_ACTION_DELAY,
        "color": True,
    }


def _normalize_text_mode(value: object) -> str:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _normalize_action_delay(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _DEFAULT_ACTION_DELAY
    return min(_MAX_ACTION_DELAY, max(0.0, float(value)))


def _normalize_color(value: object) -> bool:
    return value if isinstance(value, bool) else True


def normalize_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "action_delay": _normalize_action_delay(raw.get("action_delay")),
        "color": _normalize_color(raw.get("color")),
    }


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config at %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return normalize_config(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = normalize_config(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
