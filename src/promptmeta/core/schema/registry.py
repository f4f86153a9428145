#!/usr/bin/env python3
"""
Purpose:
    Implements the MetadataSchemaRegistry: owns the named schemas plugins
    contribute, lazily compiles them into one cached view, and exposes
    validation, grouping, dependency and default helpers on top of it.
"""
from __future__ import annotations

import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from promptmeta.core.hooks import HooksManager
from promptmeta.core.logging import get_logger
from promptmeta.core.schema.compiler import CompilationResult, CompiledSchema, MergeOutcome, compile_schemas
from promptmeta.core.schema.defaults import default_metadata
from promptmeta.core.schema.dependency import is_dependency_satisfied
from promptmeta.core.schema.field_schema import FieldSchema, find_field
from promptmeta.core.schema.group import SchemaGroup
from promptmeta.core.schema.named_schema import NamedSchema
from promptmeta.core.schema.validator import MISSING, validate_field
from promptmeta.core.validation import ValidationResult

logger = get_logger(__name__)


class MetadataSchemaRegistry:
    """
    Registry of metadata schemas keyed by name.

    Registration order is preserved; re-registering a name replaces the
    schema in place (last writer wins). Every register/unregister clears the
    compiled cache and bumps the version counter, so the next read rebuilds.

    Args:
        hooks: hook manager notified on (un)registration and consulted during
            validation. A private one is created when omitted.
        skip_inactive_fields: when True, `validate` ignores fields whose
            dependencies are unmet. Default False: every field is validated.
    """

    def __init__(self, hooks: Optional[HooksManager] = None, *, skip_inactive_fields: bool = False):
        self._hooks = hooks if hooks is not None else HooksManager()
        self._skip_inactive_fields = skip_inactive_fields
        self._schemas: Dict[str, NamedSchema] = {}
        self._compiled: Optional[CompilationResult] = None
        self._version: int = 0
        self._lock = threading.RLock()

    # --- Registration --- #

    def register(self, schema: Union[NamedSchema, Mapping[str, Any]]) -> None:
        """Add or replace `schema` (by name), then notify hooks."""
        if not isinstance(schema, NamedSchema):
            schema = NamedSchema.model_validate(schema)
        with self._lock:
            replaced = schema.name in self._schemas
            self._schemas[schema.name] = schema
            self._invalidate()
        logger.debug("Metadata schema registered", schema=schema.name, version=schema.version, replaced=replaced)
        self._hooks.execute_schema_register(schema)

    def unregister(self, name: str) -> None:
        """Remove the schema called `name` if present, then notify hooks."""
        with self._lock:
            removed = self._schemas.pop(name, None) is not None
            self._invalidate()
        logger.debug("Metadata schema unregistered", schema=name, removed=removed)
        self._hooks.execute_schema_unregister(name)

    # --- Query API --- #

    def get_schemas(self) -> List[NamedSchema]:
        """Registered schemas in insertion order."""
        with self._lock:
            return list(self._schemas.values())

    def get_schema(self, name: str) -> Optional[NamedSchema]:
        """Registered schema by name, or None."""
        with self._lock:
            return self._schemas.get(name)

    def get_compiled_schema(self) -> CompiledSchema:
        """Merged view of all registered schemas, rebuilt only after a mutation."""
        return self.get_compilation().schema

    def get_compilation(self) -> CompilationResult:
        """The compiled schema together with its merge outcomes."""
        with self._lock:
            if self._compiled is None:
                self._compiled = compile_schemas(self._schemas.values(), self._version)
            return self._compiled

    def get_merge_outcomes(self) -> List[MergeOutcome]:
        return list(self.get_compilation().outcomes)

    def get_fields_by_group(self, group_key: str) -> List[FieldSchema]:
        """Fields rendered under `group_key`, stably sorted by `order`."""
        fields = [f for f in self.get_compiled_schema().fields if f.group == group_key]
        return sorted(fields, key=lambda f: f.sort_order)

    def get_groups(self) -> List[SchemaGroup]:
        """All merged groups, stably sorted by `order`."""
        return sorted(self.get_compiled_schema().groups, key=lambda g: g.sort_order)

    def get_field(self, key: str) -> Optional[FieldSchema]:
        """First compiled field with `key`, or None."""
        return find_field(self.get_compiled_schema().fields, key)

    def require_field(self, key: str) -> FieldSchema:
        """Compiled field by key or raise LookupError if not found."""
        fs = self.get_field(key)
        if fs is None:
            raise LookupError(f"Metadata field {key!r} not found")
        return fs

    def is_dependency_satisfied(self, field: FieldSchema, metadata: Mapping[str, Any]) -> bool:
        """True if every dependency of `field` holds for `metadata`."""
        return is_dependency_satisfied(field, metadata)

    def get_default_metadata(self) -> Dict[str, Any]:
        """Initial metadata built from field defaults (fields without one are omitted)."""
        return default_metadata(self.get_compiled_schema().fields)

    @property
    def hooks(self) -> HooksManager:
        return self._hooks

    @property
    def version(self) -> int:
        """Invalidation counter; increases on every register/unregister."""
        with self._lock:
            return self._version

    # --- Validation --- #

    def validate(self, metadata: Mapping[str, Any], *, skip_inactive: Optional[bool] = None) -> ValidationResult:
        """
        Validate `metadata` against the compiled schema, then merge hook errors.

        Args:
            metadata: the record's metadata mapping. Anything that is not a
                mapping (e.g. None) is logged and validated as `{}`.
            skip_inactive: override the registry-wide `skip_inactive_fields`
                switch for this call. When skipping, fields whose dependencies
                are unmet are not checked at all.

        Returns:
            ValidationResult whose errors hold schema errors overlaid with hook
            errors (hooks win for the same key). Warnings are always empty.
        """
        if not isinstance(metadata, Mapping):
            logger.warning("Metadata is not a mapping; validating as empty", type=type(metadata).__name__)
            metadata = {}

        skip = self._skip_inactive_fields if skip_inactive is None else skip_inactive
        result = ValidationResult()

        for fs in self.get_compiled_schema().fields:
            if skip and not is_dependency_satisfied(fs, metadata):
                continue
            error = validate_field(fs, metadata.get(fs.key, MISSING))
            if error:
                result.add(fs.key, error)

        result.merge(self._hooks.execute_validate(metadata))
        return result

    # --- Internals --- #

    def _invalidate(self) -> None:
        self._compiled = None
        self._version += 1
