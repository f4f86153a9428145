#!/usr/bin/env python3
"""
Pydantic model for the named, ordered sections metadata fields render under.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from promptmeta.core.schema.field_specs import Bound


class SchemaGroup(BaseModel):
    """
    Organizational container for fields; never validated against metadata.

    Example
    -------
    >>> g = SchemaGroup(key="basic", label="Basic Information", order=0)
    >>> g.sort_order
    0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1, description="Identifier fields refer to via `group`.")
    label: str = Field(..., description="Display title.")
    description: Optional[str] = Field(default=None)
    icon: Optional[str] = Field(default=None)
    order: Optional[Bound] = Field(default=None, description="Sort key among groups.")
    collapsible: Optional[bool] = Field(default=None)
    collapsed: Optional[bool] = Field(default=None)

    @property
    def sort_order(self) -> Bound:
        """`order` with a missing value treated as 0."""
        return self.order or 0
