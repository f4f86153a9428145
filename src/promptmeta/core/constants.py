#!/usr/bin/env python3
"""
Core constants used across promptmeta.

- Naming: the compiled schema identity and the built-in core schema name.
- File handling: default text encoding for configuration files.
- Regular expressions: compiled patterns used by manifest validation.
"""

import re
from typing import Final

# --- promptmeta constants --- #

# Name carried by every compiled (merged) schema
COMPILED_SCHEMA_NAME: Final[str] = "compiled"

# Description carried by every compiled (merged) schema
COMPILED_SCHEMA_DESCRIPTION: Final[str] = "Compiled schema from all registered schemas"

# Name of the built-in schema registered at startup
CORE_SCHEMA_NAME: Final[str] = "core"

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Environment strings read as True
TRUTHY_STRINGS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


# --- Regular Expressions --- #
# Matches versions that start with x.y.z (e.g., 1.0.0, 1.2.3-beta)
SEMVER_PREFIX_RE: re.Pattern[str] = re.compile(r"^\d+\.\d+\.\d+")

# Matches valid field keys: leading letter/underscore, then letters/numbers/underscores
FIELD_KEY_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Allowed plugin names: letters, digits, hyphen, underscore
PLUGIN_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_-]+$")
