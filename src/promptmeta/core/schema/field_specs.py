#!/usr/bin/env python3
"""
Purpose:
    Defines Pydantic specification models for each supported metadata field
    kind. Each model carries only the constraints meaningful for its kind,
    and all of them form one discriminated union keyed on 'kind'.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from promptmeta.core.schema.field_type import FieldType


Bound = Union[int, float]


# --- Shared pieces --- #

class FieldOption(BaseModel):
    """One choice of a select/multiselect field."""
    model_config = ConfigDict(extra="forbid")

    value: Any = Field(..., description="Stored value when this option is picked.")
    label: str = Field(..., description="Display text for the option.")


class _SpecBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


class _StringConstraints(_SpecBase):
    """Length and pattern constraints checked against string values."""
    min_length: Optional[int] = Field(default=None, ge=0, description="Minimum number of characters.")
    max_length: Optional[int] = Field(default=None, ge=0, description="Maximum number of characters.")
    pattern: Optional[str] = Field(
        default=None,
        description="Regex searched for in string values.",
    )

    _regex: Optional[re.Pattern[str]] = PrivateAttr(default=None)

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Reject patterns that do not compile."""
        if v is None:
            return v
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        return v

    def model_post_init(self, __context: Any) -> None:
        if self.pattern is not None:
            self._regex = re.compile(self.pattern)

    @property
    def regex(self) -> Optional[re.Pattern[str]]:
        """Compiled `pattern`, or None."""
        return self._regex


# --- Per-kind spec models --- #

class TextSpec(_StringConstraints):
    """Specification for string/textarea/markdown fields."""
    kind: Literal["string", "textarea", "markdown"] = "string"


class NumberSpec(_SpecBase):
    """Specification for a numeric field (int or float)."""
    kind: Literal["number"] = "number"
    minimum: Optional[Bound] = Field(default=None, description="Inclusive lower bound.")
    maximum: Optional[Bound] = Field(default=None, description="Inclusive upper bound.")


class BooleanSpec(_SpecBase):
    """Specification for a boolean field."""
    kind: Literal["boolean"] = "boolean"


class ObjectSpec(_SpecBase):
    """Specification for a free-form mapping field."""
    kind: Literal["object"] = "object"


class ArraySpec(_SpecBase):
    """Specification for a free-form list field."""
    kind: Literal["array"] = "array"
    min_items: Optional[int] = Field(default=None, ge=0, description="Minimum number of items.")
    max_items: Optional[int] = Field(default=None, ge=0, description="Maximum number of items.")


class SelectSpec(_StringConstraints):
    """
    Specification for a single-choice field.

    `options=None` leaves the field unconstrained; an empty list accepts nothing.
    Length and pattern constraints apply only when the chosen value is a string.
    """
    kind: Literal["select"] = "select"
    options: Optional[List[FieldOption]] = Field(default=None, description="Allowed choices.")


class MultiSelectSpec(_SpecBase):
    """
    Specification for a multi-choice field.

    Options are presentation hints; item membership is not enforced.
    """
    kind: Literal["multiselect"] = "multiselect"
    options: Optional[List[FieldOption]] = Field(default=None, description="Suggested choices.")
    min_items: Optional[int] = Field(default=None, ge=0, description="Minimum number of items.")
    max_items: Optional[int] = Field(default=None, ge=0, description="Maximum number of items.")


# --- Discriminated union of all per-kind specs --- #

FieldSpec = Annotated[
    Union[TextSpec, NumberSpec, BooleanSpec, ObjectSpec, ArraySpec, SelectSpec, MultiSelectSpec],
    Field(discriminator="kind"),
]


# --- Authoring key registry --- #
# Maps each FieldType to its spec model and to the flat authoring keys it
# accepts. Authoring keys come from `validation: {min, max, pattern}` and the
# top-level `options`; the right-hand side names the spec attribute.

SPEC_REGISTRY: Dict[FieldType, tuple[Type[_SpecBase], Dict[str, str]]] = {
    FieldType.STRING:      (TextSpec, {"min": "min_length", "max": "max_length", "pattern": "pattern"}),
    FieldType.TEXTAREA:    (TextSpec, {"min": "min_length", "max": "max_length", "pattern": "pattern"}),
    FieldType.MARKDOWN:    (TextSpec, {"min": "min_length", "max": "max_length", "pattern": "pattern"}),
    FieldType.NUMBER:      (NumberSpec, {"min": "minimum", "max": "maximum"}),
    FieldType.BOOLEAN:     (BooleanSpec, {}),
    FieldType.OBJECT:      (ObjectSpec, {}),
    FieldType.ARRAY:       (ArraySpec, {"min": "min_items", "max": "max_items"}),
    FieldType.SELECT:      (SelectSpec, {"options": "options", "min": "min_length", "max": "max_length", "pattern": "pattern"}),
    FieldType.MULTISELECT: (MultiSelectSpec, {"options": "options", "min": "min_items", "max": "max_items"}),
}


def spec_keys_for(ft: FieldType) -> Dict[str, str]:
    """Authoring-key → spec-attribute mapping for a kind (empty for unknown kinds)."""
    return SPEC_REGISTRY.get(ft, (None, {}))[1]
