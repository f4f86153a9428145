#!/usr/bin/env python3
"""
Purpose:
    Merges registered NamedSchemas into one CompiledSchema and reports how
    each key collision was resolved.

Merge policy:
    - groups dedupe by key; the first registration wins and later groups
      with the same key are dropped whole (SkippedDuplicateGroup)
    - fields are concatenated in registration order; a repeated key is kept
      and flagged (DuplicateFieldKeyWarning), lookups by key see the first
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from promptmeta.core.constants import COMPILED_SCHEMA_NAME, COMPILED_SCHEMA_DESCRIPTION
from promptmeta.core.logging import get_logger
from promptmeta.core.schema.field_schema import FieldSchema
from promptmeta.core.schema.group import SchemaGroup
from promptmeta.core.schema.named_schema import NamedSchema

logger = get_logger(__name__)


# --- Compiled view --- #

class CompiledSchema(BaseModel):
    """
    Merged view of every registered schema; `version` changes on every mutation.

    Groups and fields are tuples: the registry hands out its cached instance.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(default=COMPILED_SCHEMA_NAME)
    version: str = Field(..., description="Registry invalidation counter, as a string.")
    description: str = Field(default=COMPILED_SCHEMA_DESCRIPTION)
    groups: Tuple[SchemaGroup, ...] = Field(default=())
    fields: Tuple[FieldSchema, ...] = Field(default=())


# --- Merge outcomes --- #

@dataclass(frozen=True)
class Applied:
    """A schema was merged; counts cover what it actually contributed."""
    schema_name: str
    groups_added: int
    fields_added: int


@dataclass(frozen=True)
class SkippedDuplicateGroup:
    """A group was dropped because an earlier schema already declared its key."""
    schema_name: str
    group_key: str
    kept_from: str


@dataclass(frozen=True)
class DuplicateFieldKeyWarning:
    """A field was kept although an earlier field already used its key."""
    schema_name: str
    field_key: str
    first_from: str


MergeOutcome = Union[Applied, SkippedDuplicateGroup, DuplicateFieldKeyWarning]


@dataclass(frozen=True)
class CompilationResult:
    """The compiled schema together with the outcome of every merge step."""
    schema: CompiledSchema
    outcomes: Tuple[MergeOutcome, ...] = ()

    @property
    def warnings(self) -> List[MergeOutcome]:
        """Only the conflict outcomes (everything but Applied)."""
        return [o for o in self.outcomes if not isinstance(o, Applied)]


# --- Compiler --- #

def compile_schemas(schemas: Iterable[NamedSchema], version: int | str) -> CompilationResult:
    """
    Merge `schemas` (in the given order) into one CompiledSchema.

    Pure with respect to its inputs: the same schemas in the same order
    always produce the same groups, fields and outcomes.
    """
    groups: Dict[str, SchemaGroup] = {}
    group_owner: Dict[str, str] = {}
    fields: List[FieldSchema] = []
    field_owner: Dict[str, str] = {}
    outcomes: List[MergeOutcome] = []

    for schema in schemas:
        groups_added = 0
        for group in schema.groups:
            if group.key in groups:
                outcomes.append(SkippedDuplicateGroup(schema.name, group.key, group_owner[group.key]))
                logger.warning(
                    "Duplicate group key dropped",
                    group_key=group.key,
                    schema=schema.name,
                    kept_from=group_owner[group.key],
                )
                continue
            groups[group.key] = group
            group_owner[group.key] = schema.name
            groups_added += 1

        for fs in schema.fields:
            if fs.key in field_owner:
                outcomes.append(DuplicateFieldKeyWarning(schema.name, fs.key, field_owner[fs.key]))
                logger.warning(
                    "Field key conflict: defined in multiple schemas",
                    field_key=fs.key,
                    schema=schema.name,
                    first_from=field_owner[fs.key],
                )
            else:
                field_owner[fs.key] = schema.name
            fields.append(fs)

        outcomes.append(Applied(schema.name, groups_added, len(schema.fields)))

    compiled = CompiledSchema(
        version=str(version),
        groups=tuple(groups.values()),
        fields=tuple(fields),
    )
    logger.debug("Compiled metadata schema", version=compiled.version, fields=len(fields), groups=len(groups))
    return CompilationResult(schema=compiled, outcomes=tuple(outcomes))
