from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences (scan roots, cache capacity,
tree rendering defaults) as JSON in the application data directory, with
default fallback on missing or corrupted files.
"""

import json
import logging
import os
from typing import Any, Dict

from dirscout.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_CACHE_CAPACITY,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_TREE_DEPTH,
)
from dirscout.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    An empty ``roots`` list means the standard root set (home, /usr/local,
    /opt, working directory).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Directory cache
        "roots": [],
        "capacity": DEFAULT_CACHE_CAPACITY,

        # Tree rendering
        "max_depth": DEFAULT_TREE_DEPTH,
        "show_hidden": False,
        "dirs_only": True,
        "icons": False,

        # Checksums
        "hash_algorithm": DEFAULT_HASH_ALGORITHM,

        # Diagnostics
        "log_file": "",
    }


def get_config_path() -> str:
    """Return the absolute path of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Unknown keys are dropped. Missing, unreadable or malformed files yield
    the defaults.

    Returns:
        Dict[str, Any]: The effective (unvalidated) configuration.
    """
    config = get_default_config()
    path = get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    path = get_config_path()
    payload = {k: v for k, v in config.items() if k in get_default_config()}
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
