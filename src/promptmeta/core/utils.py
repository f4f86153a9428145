#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as name/version checks, strict
    value comparison, dictionary merge, and file I/O utilities for promptmeta.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict

from promptmeta.core.constants import (
    SEMVER_PREFIX_RE, FIELD_KEY_ALLOWED_RE,
    PLUGIN_NAME_ALLOWED_RE, DEFAULT_TEXT_ENCODING, TRUTHY_STRINGS,
)


# --- Validation Helpers --- #

def is_semver_prefixed(version: str) -> bool:
    """Return True if the version string starts with 'x.y.z'."""
    return bool(SEMVER_PREFIX_RE.match(version))


def is_valid_field_key(key: str) -> bool:
    """Return True if the field key fully matches the allowed pattern."""
    return bool(FIELD_KEY_ALLOWED_RE.fullmatch(key))


def is_valid_plugin_name(name: str) -> bool:
    """Return True if the plugin name fully matches the allowed pattern."""
    return bool(PLUGIN_NAME_ALLOWED_RE.fullmatch(name))


# --- Value Helpers --- #

def is_number(value: Any) -> bool:
    """True for int/float values; bool is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """True for int/float values that are neither NaN nor infinite."""
    return is_number(value) and math.isfinite(value)


def is_list_like(value: Any) -> bool:
    """True for JSON-array shaped values (list or tuple)."""
    return isinstance(value, (list, tuple))


def strict_equals(a: Any, b: Any) -> bool:
    """
    Type-aware equality for metadata values.

    Numbers compare numerically (1 == 1.0) but never equal booleans; any other
    pair must share a type before values are compared, so 0 != False and
    "1" != 1.
    """
    if is_number(a) and is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b


def format_bound(value: float) -> str:
    """Render a numeric bound without a trailing '.0' for whole floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_bool(value: str) -> bool:
    """Interpret an environment-style string as a boolean."""
    return value.strip().lower() in TRUTHY_STRINGS


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
