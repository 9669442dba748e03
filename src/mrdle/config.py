"""
Config module for mrdle.

Loads user settings from a JSON file, falling back to defaults for
anything missing or malformed.
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MRDLE_CONFIG"
DEFAULT_DATA_DIR = Path.home() / ".mrdle"
DEFAULT_CONFIG_FILE = DEFAULT_DATA_DIR / "config.json"


@dataclass(frozen=True)
class Settings:
    """
    User settings.

    Attributes:
        max_guesses: Guesses allowed per game
        no_color: Disable colorized output
        player: Optional player name for statistics
        data_dir: Directory holding per-player statistics
        word_file: Default word list file (None = built-in list)
    """
    max_guesses: int = 6
    no_color: bool = False
    player: str = ""
    data_dir: Path = DEFAULT_DATA_DIR
    word_file: Optional[str] = None


# Expected JSON types per setting
_SETTING_TYPES: Dict[str, Any] = {
    "max_guesses": int,
    "no_color": bool,
    "player": str,
    "data_dir": str,
    "word_file": str,
}


def _config_path(config_file: Optional[str | Path]) -> Path:
    if config_file is not None:
        return Path(config_file)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE


def load_settings(config_file: Optional[str | Path] = None) -> Settings:
    """
    Load settings from a JSON file or use defaults.

    Lookup order: config_file argument, $MRDLE_CONFIG, ~/.mrdle/config.json.
    The NO_COLOR environment variable forces no_color on.

    Args:
        config_file: Optional path to a settings file

    Returns:
        Settings object
    """
    settings = Settings()
    config_path = _config_path(config_file)

    if config_path.exists():
        settings = _apply_file(settings, config_path)
    else:
        log.debug("Config file not found: %s, using defaults", config_path)

    if os.environ.get("NO_COLOR"):
        settings = replace(settings, no_color=True)

    return settings


def _apply_file(settings: Settings, config_path: Path) -> Settings:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Failed to load settings from %s: %s. Using defaults.", config_path, e)
        return settings

    if not isinstance(loaded, dict):
        log.warning("Settings file %s must hold a JSON object. Using defaults.", config_path)
        return settings

    overrides: Dict[str, Any] = {}
    for field in fields(Settings):
        if field.name not in loaded:
            continue
        value = loaded[field.name]
        expected = _SETTING_TYPES[field.name]

        # bool is an int subclass; don't accept it as a guess count
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            log.warning("Invalid type for setting '%s': %s. Using default.",
                        field.name, type(value).__name__)
            continue
        if field.name == "max_guesses" and value < 1:
            log.warning("Setting 'max_guesses' must be positive, got %d. Using default.", value)
            continue

        overrides[field.name] = Path(value).expanduser() if field.name == "data_dir" else value

    return replace(settings, **overrides)
