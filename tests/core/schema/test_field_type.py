#!/usr/bin/env python3
import pytest

from promptmeta.core.schema.field_type import FieldType


# --- Parser Helpers --- #

@pytest.mark.parametrize("raw,expected", [
    ("string", FieldType.STRING),
    (" String ", FieldType.STRING),
    ("NUMBER", FieldType.NUMBER),
    ("boolean", FieldType.BOOLEAN),
    ("array", FieldType.ARRAY),
    ("object", FieldType.OBJECT),
    ("select", FieldType.SELECT),
    ("multiselect", FieldType.MULTISELECT),
    ("textarea", FieldType.TEXTAREA),
    ("markdown", FieldType.MARKDOWN),
    (FieldType.SELECT, FieldType.SELECT),
    (None, FieldType.INVALID),
    ("date", FieldType.INVALID),
    (123, FieldType.INVALID),
])
def test_parsers(raw, expected):
    assert FieldType.parse(raw) is expected
    if expected == FieldType.INVALID:
        assert FieldType.try_parse(raw) is None
    else:
        assert FieldType.try_parse(raw) is expected


def test_valid_values_excludes_invalid():
    values = FieldType.valid_values()
    assert "invalid" not in values
    assert len(values) == 9


# --- Introspection helpers --- #

@pytest.mark.parametrize("ft,text,list_like,options", [
    (FieldType.STRING,      True,  False, False),
    (FieldType.TEXTAREA,    True,  False, False),
    (FieldType.MARKDOWN,    True,  False, False),
    (FieldType.NUMBER,      False, False, False),
    (FieldType.BOOLEAN,     False, False, False),
    (FieldType.ARRAY,       False, True,  False),
    (FieldType.MULTISELECT, False, True,  True),
    (FieldType.SELECT,      False, False, True),
    (FieldType.OBJECT,      False, False, False),
    (FieldType.INVALID,     False, False, False),
])
def test_introspection_helpers(ft, text, list_like, options):
    assert ft.is_text() == text
    assert ft.is_list_like() == list_like
    assert ft.has_options() == options
