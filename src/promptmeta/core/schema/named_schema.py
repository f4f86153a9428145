#!/usr/bin/env python3
"""
Purpose:
    Defines the NamedSchema model: the bundle of groups and fields a single
    plugin (or the built-in core) contributes, and the unit the registry
    registers and unregisters.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from promptmeta.core.schema.field_schema import FieldSchema, find_field
from promptmeta.core.schema.group import SchemaGroup


# --- Model --- #

class NamedSchema(BaseModel):
    """
    A self-contained bundle of metadata groups and fields.

    Fields:
    -------
    name:
        registry key; registering another schema with the same name replaces this one
    version:
        free-form version label supplied by the author
    groups / fields:
        contributed in order; duplicates *within* one schema are allowed and
        resolved by the compiler exactly like duplicates across schemas
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Registry key for this schema.")
    version: str = Field(..., description="Author-managed version label.")
    description: Optional[str] = Field(default=None)
    groups: List[SchemaGroup] = Field(default_factory=list)
    fields: List[FieldSchema] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, v: Any) -> str:
        s = "" if v is None else str(v).strip()
        if not s:
            raise ValueError("A schema 'name' must be a non-empty string")
        return s

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("groups", "fields", mode="before")
    @classmethod
    def _none_means_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    # --- Convenience --- #

    @property
    def field_keys(self) -> List[str]:
        """Keys of contributed fields, in declaration order."""
        return [f.key for f in self.fields]

    def get_field(self, key: str) -> Optional[FieldSchema]:
        """First field with `key`, or None."""
        return find_field(self.fields, key)
