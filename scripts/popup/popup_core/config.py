"""User config loading for theme colours and key bindings."""

from __future__ import annotations

import json
import os
from pathlib import Path

from popup_core.keys import KeyConfig, key_config_from_config
from popup_core.theme import Theme, theme_from_config

CONFIG_ENV = "POPUP_TUI_CONFIG"
CONFIG_SECTIONS = {"theme", "keys"}


def default_config_path() -> str | None:
    return os.environ.get(CONFIG_ENV) or None


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc

    if not isinstance(config, dict):
        raise ValueError("config must be a JSON object")
    unknown = sorted(set(config) - CONFIG_SECTIONS)
    if unknown:
        raise ValueError(f"unknown config section: {', '.join(unknown)}")
    return config


def resolve_config(config_path: str | None = None) -> tuple[Theme, KeyConfig]:
    user_config = load_user_config(config_path)
    theme = theme_from_config(user_config.get("theme"))
    key_config = key_config_from_config(user_config.get("keys"))
    return theme, key_config
