# sbsdiff/config.py
"""Display settings for diff rendering.

Settings are resolved in three layers, later layers winning:

1. Built-in defaults (DisplaySettings()).
2. The "display" object of a JSON settings file, by default
   ~/.sbsdiff/config.json.
3. SBSDIFF_* environment variables, optionally loaded from a .env file.

Example settings file:
    {
      "display": {
        "use_colors": true,
        "side_by_side_diff": true,
        "diff_context_lines": 3,
        "terminal_width": 120,
        "show_line_numbers": true,
        "syntax_highlighting": true
      }
    }
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "yes", "1", "on")
_FALSE_VALUES = ("false", "no", "0", "off")


@dataclass
class DisplaySettings:
    """Display options owned by the caller and consumed by the renderers.

    context_lines is informational: the engine renders whatever context the
    upstream diff generator produced.
    """
    use_colors: bool = True
    side_by_side: bool = True
    show_line_numbers: bool = True
    syntax_highlighting: bool = True
    context_lines: int = 3
    terminal_width: int = 120


# Settings file key -> (DisplaySettings field, type)
FILE_KEYS = {
    "use_colors": ("use_colors", bool),
    "side_by_side_diff": ("side_by_side", bool),
    "diff_context_lines": ("context_lines", int),
    "terminal_width": ("terminal_width", int),
    "show_line_numbers": ("show_line_numbers", bool),
    "syntax_highlighting": ("syntax_highlighting", bool),
}

# Environment variable -> (DisplaySettings field, type)
ENV_KEYS = {
    "SBSDIFF_USE_COLORS": ("use_colors", bool),
    "SBSDIFF_SIDE_BY_SIDE": ("side_by_side", bool),
    "SBSDIFF_CONTEXT_LINES": ("context_lines", int),
    "SBSDIFF_TERMINAL_WIDTH": ("terminal_width", int),
    "SBSDIFF_LINE_NUMBERS": ("show_line_numbers", bool),
    "SBSDIFF_SYNTAX": ("syntax_highlighting", bool),
}


def default_config_path() -> Path:
    """Get the path to the user settings file."""
    return Path.home() / ".sbsdiff" / "config.json"


def parse_bool(value: Any) -> Optional[bool]:
    """Parse a boolean setting, returning None when unrecognized."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def parse_int(value: Any) -> Optional[int]:
    """Parse an integer setting, returning None when unrecognized."""
    if isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _coerce(value: Any, kind: type) -> Optional[Any]:
    if kind is bool:
        return parse_bool(value)
    return parse_int(value)


def _apply(
    settings: DisplaySettings,
    values: Dict[str, Any],
    keys: Dict[str, tuple],
    source: str,
) -> DisplaySettings:
    """Apply recognized keys from values onto settings."""
    changes: Dict[str, Any] = {}
    for key, raw in values.items():
        if key not in keys:
            continue
        field_name, kind = keys[key]
        parsed = _coerce(raw, kind)
        if parsed is None:
            logger.warning("Ignoring invalid %s value for %s: %r", source, key, raw)
            continue
        changes[field_name] = parsed
    return replace(settings, **changes)


def _load_file(config_path: Path) -> Dict[str, Any]:
    """Load the "display" object from a JSON settings file.

    Returns:
        Dictionary of display settings, empty if the file is missing or invalid.
    """
    try:
        if not config_path.exists():
            logger.debug("Settings file does not exist: %s", config_path)
            return {}
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load settings from %s: %s", config_path, e)
        return {}

    display = data.get("display", {}) if isinstance(data, dict) else None
    if not isinstance(display, dict):
        logger.warning("Settings file %s has no \"display\" object", config_path)
        return {}
    return display


def load_display_settings(
    config_path: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> DisplaySettings:
    """Resolve display settings from defaults, settings file and environment.

    Args:
        config_path: JSON settings file (default: ~/.sbsdiff/config.json).
        env_file: Optional .env file loaded before reading SBSDIFF_* variables.
            Variables already set in the environment are not overridden.

    Returns:
        Resolved DisplaySettings.
    """
    settings = DisplaySettings()

    path = Path(config_path) if config_path else default_config_path()
    settings = _apply(settings, _load_file(path), FILE_KEYS, "settings file")

    if env_file:
        load_dotenv(env_file)

    env_values = {name: os.environ[name] for name in ENV_KEYS if name in os.environ}
    settings = _apply(settings, env_values, ENV_KEYS, "environment")

    logger.debug("Resolved display settings: %s", settings)
    return settings


def save_display_settings(
    settings: DisplaySettings,
    config_path: Optional[Union[str, Path]] = None,
) -> bool:
    """Write settings to the "display" object of a JSON settings file.

    Other top-level keys already in the file are preserved.

    Returns:
        True if saved successfully, False otherwise.
    """
    path = Path(config_path) if config_path else default_config_path()

    data: Dict[str, Any] = {}
    try:
        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if isinstance(loaded, dict):
                data = loaded
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Overwriting unreadable settings file %s: %s", path, e)

    data["display"] = {
        key: getattr(settings, field_name)
        for key, (field_name, _) in FILE_KEYS.items()
    }

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return True
    except OSError as e:
        logger.warning("Failed to save settings to %s: %s", path, e)
        return False
