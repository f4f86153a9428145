#!/usr/bin/env python3
import pytest

from promptmeta.core.exceptions import PluginValidationError
from promptmeta.core.hooks import HookCallbacks, HooksManager
from promptmeta.core.plugin.manifest import PluginManifest
from promptmeta.core.plugin.registry import PluginRegistry, PluginStats
from promptmeta.core.schema.core_schema import create_default_registry


# --- Helpers --- #

API_PLUGIN = {
    "name": "api-plugin",
    "version": "1.0.0",
    "metadataSchema": {
        "name": "api-plugin",
        "version": "1.0.0",
        "fields": [{
            "key": "apiVersion",
            "type": "string",
            "label": "API Version",
            "required": True,
            "validation": {"pattern": r"^v?\d+\.\d+\.\d+$"},
        }],
    },
}


@pytest.fixture
def registries():
    hooks = HooksManager()
    schemas = create_default_registry(hooks)
    return schemas, PluginRegistry(schemas, hooks)


# --- Register / unregister --- #

def test_register_adds_schema_and_hooks(registries):
    schemas, plugins = registries
    cb = HookCallbacks(on_metadata_validate=lambda m: {})
    plugin = plugins.register({**API_PLUGIN, "hooks": cb})

    assert plugin.active and plugin.name == "api-plugin"
    assert plugins.is_registered("api-plugin")
    assert schemas.get_field("apiVersion") is not None
    assert cb in schemas.hooks.callbacks


def test_unregister_removes_schema_and_hooks(registries):
    schemas, plugins = registries
    cb = HookCallbacks(on_metadata_validate=lambda m: {"x": "y"})
    plugins.register({**API_PLUGIN, "hooks": cb})

    assert plugins.unregister("api-plugin") is True
    assert not plugins.is_registered("api-plugin")
    assert schemas.get_field("apiVersion") is None
    assert cb not in schemas.hooks.callbacks
    assert schemas.validate({"title": "T"}).valid


def test_unregister_unknown_returns_false(registries):
    _, plugins = registries
    assert plugins.unregister("nope") is False


def test_handle_unregister_is_idempotent(registries):
    schemas, plugins = registries
    plugin = plugins.register(API_PLUGIN)
    plugin.unregister()
    version = schemas.version
    plugin.unregister()
    assert not plugin.active
    assert schemas.version == version


def test_reregister_replaces_previous_plugin(registries):
    schemas, plugins = registries
    old_cb = HookCallbacks(on_metadata_validate=lambda m: {"old": "hook"})
    old = plugins.register({**API_PLUGIN, "hooks": old_cb})

    new = plugins.register({**API_PLUGIN, "version": "2.0.0"})

    assert not old.active
    assert plugins.get_plugin("api-plugin") is new
    assert old_cb not in schemas.hooks.callbacks
    assert schemas.get_field("apiVersion") is not None

    # the stale handle must not tear down the replacement
    old.unregister()
    assert plugins.get_plugin("api-plugin") is new


def test_plugin_hooks_take_part_in_validation(registries):
    schemas, plugins = registries
    plugins.register({
        "name": "no-todo",
        "version": "0.1.0",
        "hooks": HookCallbacks(
            on_metadata_validate=lambda m: {"title": "Title must not contain TODO"} if "TODO" in m.get("title", "") else {},
        ),
    })
    assert schemas.validate({"title": "Fine"}).valid
    assert schemas.validate({"title": "TODO later"}).errors == {"title": "Title must not contain TODO"}


def test_plugin_schema_validation_end_to_end(registries):
    schemas, plugins = registries
    plugins.register(API_PLUGIN)
    assert schemas.validate({"title": "T", "apiVersion": "v1.2.3"}).valid
    assert schemas.validate({"title": "T", "apiVersion": "abc"}).errors == {
        "apiVersion": "API Version format is invalid",
    }


# --- Validated registration --- #

def test_register_with_validation_accepts_good_manifest(registries):
    _, plugins = registries
    assert plugins.register_with_validation(API_PLUGIN).active


def test_register_with_validation_rejects_bad_manifest(registries):
    schemas, plugins = registries
    with pytest.raises(PluginValidationError) as exc:
        plugins.register_with_validation({"name": "bad name", "version": "1"})

    assert exc.value.errors == [
        "Plugin name must contain only alphanumeric characters, hyphens, and underscores",
        "Plugin version must follow semantic versioning (e.g., 1.0.0)",
    ]
    assert "Plugin validation failed" in str(exc.value)
    assert not plugins.is_registered("bad name")
    assert [s.name for s in schemas.get_schemas()] == ["core"]


def test_register_with_validation_wraps_parse_errors(registries):
    _, plugins = registries
    payload = {
        "name": "p",
        "version": "1.0.0",
        "metadataSchema": {"name": "p", "version": "1", "fields": [{"key": "x", "type": "date", "label": "X"}]},
    }
    with pytest.raises(PluginValidationError) as exc:
        plugins.register_with_validation(payload)
    assert any("Unknown field type" in e for e in exc.value.errors)


def test_validate_manifest_static(registries):
    _, plugins = registries
    assert plugins.validate_manifest(PluginManifest(name="ok", version="1.0.0")) == []


# --- Queries --- #

def test_stats(registries):
    _, plugins = registries
    plugins.register(API_PLUGIN)
    plugins.register({"name": "hooks-only", "version": "1.0.0", "hooks": HookCallbacks()})
    plugins.register({"name": "bare", "version": "1.0.0"})

    assert plugins.get_stats() == PluginStats(total=3, active=3, with_metadata_schema=1, with_hooks=1)
    assert [p.name for p in plugins.get_plugins()] == ["api-plugin", "hooks-only", "bare"]


def test_plugin_registry_defaults_to_schema_registry_hooks():
    schemas = create_default_registry()
    plugins = PluginRegistry(schemas)
    cb = HookCallbacks()
    plugins.register({"name": "p", "version": "1.0.0", "hooks": cb})
    assert cb in schemas.hooks.callbacks
