#!/usr/bin/env python3
"""
Purpose:
    Dependency conditions that gate whether a metadata field is active, and
    the resolver that evaluates them against a metadata mapping.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from promptmeta.core.utils import is_list_like, strict_equals

if TYPE_CHECKING:
    from promptmeta.core.schema.field_schema import FieldSchema


class DependencyCondition(str, Enum):
    """Predicate applied to the value of the field a dependency points at."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"


class FieldDependency(BaseModel):
    """One activation condition: `metadata[field] <condition> value`."""

    model_config = ConfigDict(extra="forbid")

    field: str = Field(..., description="Key of the field whose value is inspected.")
    value: Any = Field(..., description="Value compared against.")
    condition: DependencyCondition = Field(default=DependencyCondition.EQUALS)

    @field_validator("condition", mode="before")
    @classmethod
    def _default_condition(cls, v: Any) -> Any:
        """An explicit null condition means 'equals'."""
        return DependencyCondition.EQUALS if v is None else v


# Marks a key absent from the metadata mapping; never equal to any value.
_MISSING = object()


# --- Resolver --- #

def is_condition_met(dep: FieldDependency, metadata: Mapping[str, Any]) -> bool:
    """Evaluate a single dependency against `metadata`."""
    actual = metadata.get(dep.field, _MISSING)

    match dep.condition:
        case DependencyCondition.EQUALS:
            return _equals(actual, dep.value)
        case DependencyCondition.NOT_EQUALS:
            return not _equals(actual, dep.value)
        case DependencyCondition.CONTAINS:
            return _contains(actual, dep.value)
        case DependencyCondition.NOT_CONTAINS:
            return not _contains(actual, dep.value)


def is_dependency_satisfied(field: FieldSchema, metadata: Mapping[str, Any]) -> bool:
    """
    True when every dependency of `field` holds for `metadata` (logical AND).

    A field without dependencies is always active.
    """
    return all(is_condition_met(dep, metadata) for dep in field.dependencies)


def _equals(actual: Any, expected: Any) -> bool:
    if actual is _MISSING:
        return False
    return strict_equals(actual, expected)


def _contains(actual: Any, expected: Any) -> bool:
    if actual is _MISSING or not is_list_like(actual):
        return False
    return any(strict_equals(item, expected) for item in actual)
