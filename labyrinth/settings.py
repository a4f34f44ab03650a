"""
Settings Module for Labyrinth Runner

Remembers the last chosen algorithm, maze size and delay between runs.
Values live in a JSON object in the working directory; keys missing from
the file take their value from DEFAULT_SETTINGS.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from labyrinth.solver.factory import DEFAULT_ALGORITHM

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "algorithm_name": DEFAULT_ALGORITHM,
    "width": 40,
    "height": 20,
    "delay_ms": 100,
    "debug_enabled": False,
}


def _resolve(path: Optional[Path]) -> Path:
    return SETTINGS_FILE if path is None else Path(path)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read saved settings on top of the defaults.

    Args:
        path: JSON file to read (default: SETTINGS_FILE)

    Returns:
        A new dictionary holding every DEFAULT_SETTINGS key. An absent,
        unreadable or malformed file yields the defaults unchanged, and a
        stored value whose type differs from its default is dropped.
    """
    source = _resolve(path)
    merged = dict(DEFAULT_SETTINGS)

    if not source.is_file():
        logger.debug(f"No settings at {source}, using defaults")
        return merged

    try:
        stored = json.loads(source.read_text(encoding='utf-8'))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {source}: {e}")
        return merged

    if not isinstance(stored, dict):
        logger.warning(f"Ignoring settings file {source}: expected a JSON object")
        return merged

    for key, value in stored.items():
        default = DEFAULT_SETTINGS.get(key)
        # bool is an int subclass, so compare exact types
        if key in DEFAULT_SETTINGS and type(value) is not type(default):
            logger.warning(
                f"Ignoring setting {key}={value!r} in {source}: "
                f"expected {type(default).__name__}"
            )
            continue
        merged[key] = value

    logger.debug(f"Loaded settings from {source}: {merged}")
    return merged


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Write settings as indented JSON.

    A failed write is logged and otherwise ignored; the run itself does
    not depend on the file.

    Args:
        settings: Values to persist
        path: JSON file to write (default: SETTINGS_FILE)
    """
    target = _resolve(path)
    try:
        target.write_text(json.dumps(settings, indent=2), encoding='utf-8')
    except OSError as e:
        logger.error(f"Could not write settings to {target}: {e}")
        return
    logger.debug(f"Saved settings to {target}")
