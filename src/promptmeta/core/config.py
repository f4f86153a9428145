#!/usr/bin/env python3
"""
promptmeta configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from promptmeta.core.utils import merge_dicts, load_json_file, parse_bool

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "validation": {"skip_inactive_fields": False},
    "logging": {"level": "INFO", "json": False},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "promptmeta" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load promptmeta configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/promptmeta/config.json)
        3. Project config (./promptmeta.json)
        4. Environment overrides:
           - PROMPTMETA_LOG_LEVEL
           - PROMPTMETA_LOG_JSON
           - PROMPTMETA_SKIP_INACTIVE_FIELDS

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "promptmeta.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    log_level_env = os.getenv("PROMPTMETA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    log_json_env = os.getenv("PROMPTMETA_LOG_JSON")
    if log_json_env:
        config.setdefault("logging", {})["json"] = parse_bool(log_json_env)

    skip_env = os.getenv("PROMPTMETA_SKIP_INACTIVE_FIELDS")
    if skip_env:
        config.setdefault("validation", {})["skip_inactive_fields"] = parse_bool(skip_env)

    return config


def skip_inactive_fields(config: Dict[str, Any]) -> bool:
    """Read the 'validation.skip_inactive_fields' switch (False when unset)."""
    return bool(config.get("validation", {}).get("skip_inactive_fields", False))
