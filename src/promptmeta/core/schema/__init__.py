# core/schema/__init__.py
from .field_type import FieldType
from .field_specs import (
    FieldOption, TextSpec, NumberSpec, BooleanSpec, ObjectSpec,
    ArraySpec, SelectSpec, MultiSelectSpec, FieldSpec,
)
from .dependency import DependencyCondition, FieldDependency, is_dependency_satisfied
from .field_schema import FieldSchema
from .group import SchemaGroup
from .named_schema import NamedSchema
from .compiler import (
    CompiledSchema, CompilationResult, MergeOutcome,
    Applied, SkippedDuplicateGroup, DuplicateFieldKeyWarning, compile_schemas,
)
from .validator import validate_field
from .defaults import default_metadata
from .registry import MetadataSchemaRegistry
from .core_schema import CORE_METADATA_SCHEMA, create_default_registry

__all__ = [
    "FieldType", "FieldOption", "TextSpec", "NumberSpec", "BooleanSpec", "ObjectSpec",
    "ArraySpec", "SelectSpec", "MultiSelectSpec", "FieldSpec",
    "DependencyCondition", "FieldDependency", "is_dependency_satisfied",
    "FieldSchema", "SchemaGroup", "NamedSchema",
    "CompiledSchema", "CompilationResult", "MergeOutcome",
    "Applied", "SkippedDuplicateGroup", "DuplicateFieldKeyWarning", "compile_schemas",
    "validate_field", "default_metadata",
    "MetadataSchemaRegistry", "CORE_METADATA_SCHEMA", "create_default_registry",
]
