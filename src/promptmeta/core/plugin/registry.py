#!/usr/bin/env python3
"""
Purpose:
    Implements the PluginRegistry: registers a plugin's metadata schema and
    hook bundle as one unit, so deactivating the plugin removes both.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from promptmeta.core.exceptions import PluginValidationError
from promptmeta.core.formatting import format_manifest_errors
from promptmeta.core.hooks import HooksManager
from promptmeta.core.logging import get_logger
from promptmeta.core.plugin.manifest import PluginManifest, validate_manifest
from promptmeta.core.schema.registry import MetadataSchemaRegistry

logger = get_logger(__name__)


# --- Data model --- #

@dataclass(eq=False)
class RegisteredPlugin:
    """A live registration; `unregister()` undoes it (idempotent)."""
    manifest: PluginManifest
    registered_at: datetime
    active: bool = True
    _undo: Callable[[], None] = field(default=lambda: None, repr=False)

    @property
    def name(self) -> str:
        return self.manifest.name

    def unregister(self) -> None:
        if not self.active:
            return
        self.active = False
        self._undo()


@dataclass(frozen=True)
class PluginStats:
    total: int
    active: int
    with_metadata_schema: int
    with_hooks: int


# --- Registry --- #

class PluginRegistry:
    """
    Plugins keyed by manifest name.

    Re-registering a name first unregisters the previous plugin (its schema
    and hooks), then registers the new one.
    """

    def __init__(self, schemas: MetadataSchemaRegistry, hooks: Optional[HooksManager] = None):
        self._schemas = schemas
        self._hooks = hooks if hooks is not None else schemas.hooks
        self._plugins: Dict[str, RegisteredPlugin] = {}
        self._lock = threading.RLock()

    # --- Registration --- #

    def register(self, manifest: Union[PluginManifest, Mapping[str, Any]]) -> RegisteredPlugin:
        """Register `manifest`'s schema and hooks; returns the live registration."""
        if not isinstance(manifest, PluginManifest):
            manifest = PluginManifest.model_validate(manifest)

        with self._lock:
            existing = self._plugins.get(manifest.name)
            if existing is not None:
                logger.warning(
                    "Plugin already registered; unregistering the old version",
                    plugin=manifest.name,
                    old_version=existing.manifest.version,
                )
                existing.unregister()

            schema = manifest.metadata_schema
            if schema is not None:
                self._schemas.register(schema)

            unregister_hooks: Optional[Callable[[], None]] = None
            if manifest.hooks is not None:
                unregister_hooks = self._hooks.register(manifest.hooks)

            plugin = RegisteredPlugin(manifest=manifest, registered_at=datetime.now(timezone.utc))

            def undo() -> None:
                with self._lock:
                    if schema is not None:
                        self._schemas.unregister(schema.name)
                    if unregister_hooks is not None:
                        unregister_hooks()
                    if self._plugins.get(manifest.name) is plugin:
                        del self._plugins[manifest.name]

            plugin._undo = undo
            self._plugins[manifest.name] = plugin

        logger.info("Plugin registered", plugin=manifest.name, version=manifest.version)
        return plugin

    def unregister(self, name: str) -> bool:
        """Unregister the plugin called `name`; False if it was not registered."""
        with self._lock:
            plugin = self._plugins.get(name)
        if plugin is None:
            logger.warning("Plugin is not registered", plugin=name)
            return False
        plugin.unregister()
        logger.info("Plugin unregistered", plugin=name)
        return True

    def register_with_validation(self, manifest: Union[PluginManifest, Mapping[str, Any]]) -> RegisteredPlugin:
        """
        Validate, then register.

        Raises:
            PluginValidationError: if the manifest cannot be parsed or fails
                `validate_manifest`.
        """
        if not isinstance(manifest, PluginManifest):
            try:
                manifest = PluginManifest.model_validate(manifest)
            except ValidationError as e:
                raise PluginValidationError(errors=format_manifest_errors(e, manifest)) from e

        errors = self.validate_manifest(manifest)
        if errors:
            raise PluginValidationError(errors=errors)
        return self.register(manifest)

    @staticmethod
    def validate_manifest(manifest: PluginManifest) -> List[str]:
        return validate_manifest(manifest)

    # --- Query API --- #

    def get_plugins(self) -> List[RegisteredPlugin]:
        with self._lock:
            return list(self._plugins.values())

    def get_plugin(self, name: str) -> Optional[RegisteredPlugin]:
        with self._lock:
            return self._plugins.get(name)

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._plugins

    def get_stats(self) -> PluginStats:
        plugins = self.get_plugins()
        return PluginStats(
            total=len(plugins),
            active=sum(1 for p in plugins if p.active),
            with_metadata_schema=sum(1 for p in plugins if p.manifest.metadata_schema is not None),
            with_hooks=sum(1 for p in plugins if p.manifest.hooks is not None),
        )
