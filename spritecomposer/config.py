"""Loader for spritecomposer runtime configuration.

The configuration lives in ``config.json`` under ``$SPRITECOMPOSER_HOME``
(``~/.spritecomposer`` by default).  When the file is missing or unreadable
the defaults are written back so the CLI can always rely on every key being
present.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

HOME_DIR = Path(os.environ.get("SPRITECOMPOSER_HOME", Path.home() / ".spritecomposer"))
CONFIG_PATH = HOME_DIR / "config.json"
LOGS_DIR = HOME_DIR / "logs"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "slicer": {
        "cell_width": 64,
        "cell_height": 64,
        "export_frames": False,
    },
    "logging": {
        "level": "INFO",
        "max_bytes": 5 * 1024 * 1024,
        "backup_count": 3,
    },
}


def default_config() -> Dict[str, Any]:
    return json.loads(json.dumps(_DEFAULT_CONFIG))


def _write_default() -> None:
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with CONFIG_PATH.open("w", encoding="utf-8") as handle:
        json.dump(_DEFAULT_CONFIG, handle, indent=2, sort_keys=True)
        handle.write("\n")


def load_config() -> Dict[str, Any]:
    """Return the runtime configuration, creating defaults if necessary."""

    if not CONFIG_PATH.exists():
        _write_default()
        return default_config()

    with CONFIG_PATH.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError:
            logger.warning("Config file %s is corrupted; restoring defaults", CONFIG_PATH)
            data = None

    if not isinstance(data, dict):
        _write_default()
        return default_config()

    # Merge one level deep so new default keys appear without losing user values.
    merged = default_config()
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def save_config(config: Dict[str, Any]) -> None:
    """Persist ``config`` back to ``config.json``."""

    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with CONFIG_PATH.open("w", encoding="utf-8") as handle:
        json.dump(config, handle, indent=2, sort_keys=True)
        handle.write("\n")


__all__ = ["CONFIG_PATH", "HOME_DIR", "LOGS_DIR", "default_config", "load_config", "save_config"]
