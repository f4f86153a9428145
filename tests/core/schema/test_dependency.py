#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from promptmeta.core.schema.dependency import (
    DependencyCondition, FieldDependency, is_condition_met, is_dependency_satisfied,
)
from promptmeta.core.schema.field_schema import FieldSchema


def _field(*deps) -> FieldSchema:
    return FieldSchema(key="target", type="string", label="Target", dependencies=list(deps))


# --- No dependencies --- #

def test_field_without_dependencies_is_always_active():
    assert is_dependency_satisfied(_field(), {}) is True
    assert is_dependency_satisfied(_field(), {"anything": 1}) is True


# --- equals / not_equals --- #

@pytest.mark.parametrize("metadata,expected", [
    ({"enableFeature": True}, True),
    ({"enableFeature": False}, False),
    ({"enableFeature": 1}, False),      # no cross-type equality
    ({"enableFeature": "true"}, False),
    ({}, False),                        # missing never equals
])
def test_equals(metadata, expected):
    fs = _field({"field": "enableFeature", "value": True})
    assert is_dependency_satisfied(fs, metadata) is expected


def test_equals_missing_key_is_not_none():
    fs = _field({"field": "mode", "value": None})
    assert is_dependency_satisfied(fs, {}) is False
    assert is_dependency_satisfied(fs, {"mode": None}) is True


def test_equals_numbers_compare_numerically():
    fs = _field({"field": "level", "value": 1})
    assert is_dependency_satisfied(fs, {"level": 1.0}) is True


@pytest.mark.parametrize("metadata,expected", [
    ({"mode": "draft"}, False),
    ({"mode": "final"}, True),
    ({}, True),
])
def test_not_equals(metadata, expected):
    fs = _field({"field": "mode", "value": "draft", "condition": "not_equals"})
    assert is_dependency_satisfied(fs, metadata) is expected


# --- contains / not_contains --- #

@pytest.mark.parametrize("value,expected", [
    (["basic", "advanced", "experimental"], True),
    (("advanced",), True),
    (["basic"], False),
    ([], False),
    ("advanced", False),        # a string is not an array
    ({"advanced": True}, False),
    (None, False),
])
def test_contains_is_true_iff_array_holds_value(value, expected):
    fs = _field({"field": "tags", "value": "advanced", "condition": "contains"})
    assert is_dependency_satisfied(fs, {"tags": value}) is expected


def test_contains_with_missing_key_is_false():
    fs = _field({"field": "tags", "value": "advanced", "condition": "contains"})
    assert is_dependency_satisfied(fs, {}) is False


@pytest.mark.parametrize("metadata,expected", [
    ({"tags": ["advanced"]}, False),
    ({"tags": ["basic"]}, True),
    ({"tags": "advanced"}, True),
    ({}, True),
])
def test_not_contains_is_negation(metadata, expected):
    fs = _field({"field": "tags", "value": "advanced", "condition": "not_contains"})
    assert is_dependency_satisfied(fs, metadata) is expected


# --- Conjunction --- #

def test_all_dependencies_must_hold():
    fs = _field(
        {"field": "enableFeature", "value": True},
        {"field": "tags", "value": "advanced", "condition": "contains"},
    )
    assert is_dependency_satisfied(fs, {"enableFeature": True, "tags": ["advanced"]}) is True
    assert is_dependency_satisfied(fs, {"enableFeature": True, "tags": []}) is False
    assert is_dependency_satisfied(fs, {"enableFeature": False, "tags": ["advanced"]}) is False


# --- Model --- #

def test_condition_defaults_to_equals_and_null_is_equals():
    assert FieldDependency(field="a", value=1).condition is DependencyCondition.EQUALS
    assert FieldDependency(field="a", value=1, condition=None).condition is DependencyCondition.EQUALS


def test_unknown_condition_rejected():
    with pytest.raises(ValidationError):
        FieldDependency(field="a", value=1, condition="greater_than")


def test_is_condition_met_single():
    dep = FieldDependency(field="a", value="x", condition=DependencyCondition.NOT_EQUALS)
    assert is_condition_met(dep, {"a": "y"}) is True
