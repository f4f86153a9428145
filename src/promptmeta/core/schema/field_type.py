#!/usr/bin/env python3
"""
Purpose:
    Defines the FieldType enumeration for promptmeta metadata fields, along
    with helpers for parsing and introspection of field kinds.
"""

from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    """
    Supported metadata field kinds.

    - string      : single-line text
    - textarea    : multi-line plain text
    - markdown    : multi-line markdown text
    - number      : finite numeric scalar (int or float)
    - boolean     : true/false scalar
    - array       : free-form list of values
    - object      : mapping of named values
    - select      : one value from a fixed option list
    - multiselect : list of values, usually picked from an option list
    - invalid     : unrecognized/unsupported kind (returned by `parse`)
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    SELECT = "select"
    MULTISELECT = "multiselect"
    TEXTAREA = "textarea"
    MARKDOWN = "markdown"
    INVALID = "invalid"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | FieldType | None) -> FieldType:
        """
        Coerce arbitrary input to a `FieldType`.

        - `FieldType` instance → returned as-is
        - `None` or unknown strings → `FieldType.INVALID`
        - strings are trimmed and lowercased before lookup

        Examples
        --------
        >>> FieldType.parse(" Markdown ")
        <FieldType.MARKDOWN: 'markdown'>
        >>> FieldType.parse(None)
        <FieldType.INVALID: 'invalid'>
        >>> FieldType.parse("date")
        <FieldType.INVALID: 'invalid'>
        """
        if isinstance(value, FieldType):
            return value
        if value is None:
            return cls.INVALID
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.INVALID

    @classmethod
    def try_parse(cls, value: str | FieldType | None) -> FieldType | None:
        """
        Like `parse`, but returns `None` for unknowns instead of `FieldType.INVALID`.
        """
        ft = cls.parse(value)
        return None if ft is cls.INVALID else ft

    @classmethod
    def valid_values(cls) -> list[str]:
        """All supported kinds as strings, in declaration order."""
        return [ft.value for ft in cls if ft is not cls.INVALID]

    # --- Introspection helpers --- #

    def is_text(self) -> bool:
        """True for the string-valued kinds (string, textarea, markdown)."""
        return self in {FieldType.STRING, FieldType.TEXTAREA, FieldType.MARKDOWN}

    def is_list_like(self) -> bool:
        """True for the array-valued kinds (array, multiselect)."""
        return self in {FieldType.ARRAY, FieldType.MULTISELECT}

    def has_options(self) -> bool:
        """True if the kind carries an option list (select, multiselect)."""
        return self in {FieldType.SELECT, FieldType.MULTISELECT}
