# core/plugin/__init__.py
from .manifest import PluginManifest, validate_manifest
from .registry import PluginRegistry, RegisteredPlugin, PluginStats

__all__ = ["PluginManifest", "validate_manifest", "PluginRegistry", "RegisteredPlugin", "PluginStats"]
