"""promptmeta: plugin-extensible metadata schemas for prompts."""

from promptmeta.core.app_context import AppContext, build_context
from promptmeta.core.exceptions import PluginValidationError, PromptMetaError
from promptmeta.core.hooks import HookCallbacks, HooksManager
from promptmeta.core.plugin import PluginManifest, PluginRegistry
from promptmeta.core.schema import (
    CORE_METADATA_SCHEMA,
    FieldSchema,
    FieldType,
    MetadataSchemaRegistry,
    NamedSchema,
    SchemaGroup,
    create_default_registry,
)
from promptmeta.core.validation import ValidationResult

__version__ = "0.1.0"

__all__ = [
    "AppContext",
    "CORE_METADATA_SCHEMA",
    "FieldSchema",
    "FieldType",
    "HookCallbacks",
    "HooksManager",
    "MetadataSchemaRegistry",
    "NamedSchema",
    "PluginManifest",
    "PluginRegistry",
    "PluginValidationError",
    "PromptMetaError",
    "SchemaGroup",
    "ValidationResult",
    "__version__",
    "build_context",
    "create_default_registry",
]
