#!/usr/bin/env python3
"""
Purpose:
    Defines the PluginManifest model (what a plugin declares about itself,
    its metadata schema and its hooks) and the manifest checks run before a
    validated registration.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from promptmeta.core.hooks import HookCallbacks
from promptmeta.core.schema.named_schema import NamedSchema
from promptmeta.core.utils import is_semver_prefixed, is_valid_field_key, is_valid_plugin_name


# --- Model --- #

class PluginManifest(BaseModel):
    """
    Self-description of a plugin.

    Only `metadata_schema` (authored as `metadataSchema`) and `hooks` have an
    effect on registration; the remaining keys are informational.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(default="", description="Unique plugin identifier.")
    version: str = Field(default="", description="Plugin version (x.y.z...).")
    description: Optional[str] = Field(default=None)
    author: Optional[str] = Field(default=None)
    homepage: Optional[str] = Field(default=None)
    license: Optional[str] = Field(default=None)
    dependencies: Dict[str, str] = Field(default_factory=dict)
    metadata_schema: Optional[NamedSchema] = Field(default=None, alias="metadataSchema")
    hooks: Optional[InstanceOf[HookCallbacks]] = Field(default=None, exclude=True)


# --- Checks --- #

def validate_manifest(manifest: PluginManifest) -> List[str]:
    """
    Return human-readable problems with `manifest` (empty when it is acceptable).

    Checks:
      - name present and made of letters, digits, '-' and '_'
      - version present and starting with 'x.y.z'
      - a metadata schema, when given, has a name, a version, at least one
        field, and field keys that are identifiers
    """
    errors: List[str] = []

    if not manifest.name:
        errors.append("Plugin name is required")
    elif not is_valid_plugin_name(manifest.name):
        errors.append("Plugin name must contain only alphanumeric characters, hyphens, and underscores")

    if not manifest.version:
        errors.append("Plugin version is required")
    elif not is_semver_prefixed(manifest.version):
        errors.append("Plugin version must follow semantic versioning (e.g., 1.0.0)")

    schema = manifest.metadata_schema
    if schema is not None:
        errors.extend(_schema_errors(schema))

    return errors


def _schema_errors(schema: NamedSchema) -> List[str]:
    errors: List[str] = []
    if not schema.name:
        errors.append("Metadata schema name is required")
    if not schema.version:
        errors.append("Metadata schema version is required")
    if not schema.fields:
        errors.append("Metadata schema must have at least one field")
    for fs in schema.fields:
        if not is_valid_field_key(fs.key):
            errors.append(
                f"Field key {fs.key} must start with a letter or underscore "
                "and contain only alphanumeric characters and underscores"
            )
    return errors
