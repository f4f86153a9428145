#!/usr/bin/env python3
from promptmeta.core.constants import CORE_SCHEMA_NAME
from promptmeta.core.schema.core_schema import CORE_METADATA_SCHEMA, create_default_registry
from promptmeta.core.schema.field_type import FieldType


def test_core_schema_shape():
    assert CORE_METADATA_SCHEMA.name == CORE_SCHEMA_NAME
    assert CORE_METADATA_SCHEMA.version == "1.0.0"
    assert [g.key for g in CORE_METADATA_SCHEMA.groups] == ["basic", "organization", "technical", "documentation"]
    assert CORE_METADATA_SCHEMA.field_keys == ["title", "tags", "categoryPath", "models", "notes"]


def test_core_title_is_required_and_bounded():
    title = CORE_METADATA_SCHEMA.get_field("title")
    assert title.required is True
    assert title.type is FieldType.STRING
    assert title.spec.max_length == 100


def test_default_registry_defaults():
    registry = create_default_registry()
    assert registry.get_default_metadata() == {
        "tags": [],
        "categoryPath": "Uncategorized",
        "models": [],
        "notes": "",
    }


def test_default_registry_groups_in_order():
    registry = create_default_registry()
    assert [g.label for g in registry.get_groups()] == [
        "Basic Information", "Organization", "Technical Details", "Documentation",
    ]


def test_default_metadata_plus_title_is_valid():
    registry = create_default_registry()
    metadata = registry.get_default_metadata()
    assert registry.validate(metadata).errors == {"title": "Title is required"}

    metadata["title"] = "Summarize a document"
    assert registry.validate(metadata).valid


def test_title_length_limit():
    registry = create_default_registry()
    assert registry.validate({"title": "x" * 100}).valid
    assert registry.validate({"title": "x" * 101}).errors == {"title": "Title must be at most 100 characters"}


def test_tags_item_limit():
    registry = create_default_registry()
    tags = [f"t{i}" for i in range(11)]
    assert registry.validate({"title": "T", "tags": tags}).errors == {"tags": "Tags must have at most 10 items"}


def test_plugin_extends_core():
    registry = create_default_registry()
    registry.register({
        "name": "api-plugin",
        "version": "1.0.0",
        "fields": [{
            "key": "apiVersion",
            "type": "string",
            "label": "API Version",
            "group": "technical",
            "order": 1,
            "validation": {"pattern": r"^v?\d+\.\d+\.\d+$"},
        }],
    })
    assert [f.key for f in registry.get_fields_by_group("technical")] == ["models", "apiVersion"]
    assert registry.validate({"title": "T", "apiVersion": "v1.2.3"}).valid
    assert registry.validate({"title": "T", "apiVersion": "abc"}).errors == {"apiVersion": "API Version format is invalid"}
