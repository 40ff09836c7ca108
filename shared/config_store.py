"""Per-tool configuration store for the form assistant.

Each tool keeps a single JSON file in data/config/ (e.g. "form-assistant.json").
Values are looked up with a fallback to the hardcoded defaults below, so a
missing or corrupt file never stops the wizard from running.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

CONFIG_DIR = Path(__file__).resolve().parent.parent / "data" / "config"

TOOL_NAME = "form-assistant"

DEFAULTS: dict[str, Any] = {
    "ai_assist_enabled": False,
    "default_form_type": "aadhaar",
    "name_length_limit": 100,
    "address_length_limit": 200,
    "normalizer_model": "claude-haiku-4-5-20251001",
    "normalizer_timeout_seconds": 10.0,
    "string_overrides": {},
}


def load_config(tool_name: str) -> dict | None:
    """Load a tool's JSON config. Returns None if missing or unreadable."""
    path = CONFIG_DIR / f"{tool_name}.json"
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def save_config(tool_name: str, config: dict) -> None:
    """Write a tool's config to JSON. Creates dir if needed."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    path = CONFIG_DIR / f"{tool_name}.json"
    path.write_text(json.dumps(config, indent=2, ensure_ascii=False))


def get_config_value(tool_name: str, key: str, default: Any) -> Any:
    """Get a single key from a tool's config, with fallback to default."""
    config = load_config(tool_name)
    if config is None:
        return default
    return config.get(key, default)


def _same_kind(value: Any, default: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, type(default))


def get_setting(key: str) -> Any:
    """Look up a form-assistant setting, falling back to DEFAULTS.

    A stored value whose type does not match the default (e.g. "false"
    for a flag, null for a timeout) is ignored in favour of the default.
    """
    default = DEFAULTS.get(key)
    value = get_config_value(TOOL_NAME, key, default)
    if default is None or _same_kind(value, default):
        return value
    return default


def set_setting(key: str, value: Any) -> None:
    """Persist a single form-assistant setting, preserving other keys."""
    config = load_config(TOOL_NAME) or {}
    config[key] = value
    save_config(TOOL_NAME, config)
