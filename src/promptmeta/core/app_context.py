#!/usr/bin/env python3
"""
Purpose:
    Wires together the promptmeta application context: merges configuration,
    configures logging, and builds the hooks manager, the metadata schema
    registry (core schema pre-registered) and the plugin registry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from promptmeta.core.config import load_config, skip_inactive_fields
from promptmeta.core.hooks import HooksManager
from promptmeta.core.logging import configure_logging
from promptmeta.core.plugin.registry import PluginRegistry
from promptmeta.core.schema.core_schema import CORE_METADATA_SCHEMA
from promptmeta.core.schema.registry import MetadataSchemaRegistry


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and registries."""
    config: Dict[str, Any]
    hooks: HooksManager
    schemas: MetadataSchemaRegistry
    plugins: PluginRegistry


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    register_core: bool = True,
    configure_logs: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Every call returns fresh registries; callers hold on to the context and
    pass it (or its parts) to whatever needs them.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        register_core:
            If True, the built-in core schema is registered before returning.
        configure_logs:
            If True, (re)configures logging from `config['logging']`.

    Returns:
        AppContext: bundle of config, hooks manager, schema registry and plugin registry.
    """
    cfg = config if config is not None else load_config()

    if configure_logs:
        configure_logging(cfg, force=True)

    hooks = HooksManager()
    schemas = MetadataSchemaRegistry(hooks, skip_inactive_fields=skip_inactive_fields(cfg))
    if register_core:
        schemas.register(CORE_METADATA_SCHEMA)
    plugins = PluginRegistry(schemas, hooks)

    return AppContext(config=cfg, hooks=hooks, schemas=schemas, plugins=plugins)
