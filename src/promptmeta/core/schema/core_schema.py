#!/usr/bin/env python3
"""
Purpose:
    The built-in metadata schema every prompt carries, and a factory for a
    registry that has it pre-registered.
"""
from __future__ import annotations

from typing import Optional

from promptmeta.core.constants import CORE_SCHEMA_NAME
from promptmeta.core.hooks import HooksManager
from promptmeta.core.schema.named_schema import NamedSchema
from promptmeta.core.schema.registry import MetadataSchemaRegistry


CORE_METADATA_SCHEMA: NamedSchema = NamedSchema.model_validate({
    "name": CORE_SCHEMA_NAME,
    "version": "1.0.0",
    "description": "Core metadata fields for prompts",
    "groups": [
        {
            "key": "basic",
            "label": "Basic Information",
            "description": "Essential prompt metadata",
            "icon": "FileText",
            "order": 0,
        },
        {
            "key": "organization",
            "label": "Organization",
            "description": "Categorization and tagging",
            "icon": "Folder",
            "order": 1,
        },
        {
            "key": "technical",
            "label": "Technical Details",
            "description": "Model compatibility and settings",
            "icon": "Settings",
            "order": 2,
        },
        {
            "key": "documentation",
            "label": "Documentation",
            "description": "Notes and additional information",
            "icon": "Book",
            "order": 3,
        },
    ],
    "fields": [
        {
            "key": "title",
            "type": "string",
            "label": "Title",
            "description": "Prompt title",
            "required": True,
            "group": "basic",
            "order": 0,
            "validation": {"max": 100},
            "placeholder": "Enter prompt title...",
        },
        {
            "key": "tags",
            "type": "multiselect",
            "label": "Tags",
            "description": "Categorization tags",
            "group": "organization",
            "order": 0,
            "default": [],
            "validation": {"max": 10},
            "placeholder": "Add tags...",
        },
        {
            "key": "categoryPath",
            "type": "string",
            "label": "Category",
            "description": "Hierarchical category path",
            "group": "organization",
            "order": 1,
            "default": "Uncategorized",
            "placeholder": "Select category...",
        },
        {
            "key": "models",
            "type": "multiselect",
            "label": "Compatible Models",
            "description": "AI models this prompt works well with",
            "group": "technical",
            "order": 0,
            "default": [],
            "placeholder": "Select compatible models...",
        },
        {
            "key": "notes",
            "type": "markdown",
            "label": "Notes",
            "description": "Additional notes and documentation",
            "group": "documentation",
            "order": 0,
            "default": "",
            "placeholder": "Add notes about this prompt...",
        },
    ],
})


def create_default_registry(
    hooks: Optional[HooksManager] = None,
    *,
    skip_inactive_fields: bool = False,
) -> MetadataSchemaRegistry:
    """Build a registry with the core schema already registered."""
    registry = MetadataSchemaRegistry(hooks, skip_inactive_fields=skip_inactive_fields)
    registry.register(CORE_METADATA_SCHEMA)
    return registry
