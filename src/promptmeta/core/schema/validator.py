#!/usr/bin/env python3
"""
Purpose:
    Type- and constraint-checks a single metadata value against its
    FieldSchema. Only the first failing check produces an error.

Order of checks:
    1. required (missing / None / "")
    2. empty optional values pass
    3. type, dispatched on the field's spec
    4. kind-specific constraints (length, bounds, item counts, pattern)
    5. custom validator
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from promptmeta.core.logging import get_logger
from promptmeta.core.schema.field_schema import FieldSchema
from promptmeta.core.schema.field_specs import (
    ArraySpec,
    BooleanSpec,
    MultiSelectSpec,
    NumberSpec,
    ObjectSpec,
    SelectSpec,
    TextSpec,
)
from promptmeta.core.utils import format_bound, is_finite_number, is_list_like, strict_equals

logger = get_logger(__name__)

# Marks a key absent from the metadata mapping.
MISSING: Any = object()


def is_empty(value: Any) -> bool:
    """Missing, None and "" all count as 'no value'."""
    return value is MISSING or value is None or (isinstance(value, str) and value == "")


# --- Public API --- #

def validate_field(field: FieldSchema, value: Any = MISSING) -> Optional[str]:
    """
    Return the error message for `value`, or None when it is acceptable.

    Pass `MISSING` (the default) for keys absent from the metadata mapping.
    """
    if is_empty(value):
        return f"{field.label} is required" if field.required else None

    error = check_type(field, value)
    if error:
        return error

    error = check_constraints(field, value)
    if error:
        return error

    return run_custom_validator(field, value)


def check_type(field: FieldSchema, value: Any) -> Optional[str]:
    """Type check keyed on the field's spec; None if the runtime shape matches."""
    label = field.label
    match field.spec:
        case TextSpec():
            if not isinstance(value, str):
                return f"{label} must be a string"
        case NumberSpec():
            if not is_finite_number(value):
                return f"{label} must be a number"
        case BooleanSpec():
            if not isinstance(value, bool):
                return f"{label} must be a boolean"
        case ArraySpec() | MultiSelectSpec():
            if not is_list_like(value):
                return f"{label} must be an array"
        case ObjectSpec():
            if not isinstance(value, Mapping):
                return f"{label} must be an object"
        case SelectSpec(options=None):
            pass
        case SelectSpec(options=options):
            if not any(strict_equals(opt.value, value) for opt in options):
                allowed = ", ".join(opt.label for opt in options)
                return f"{label} must be one of: {allowed}"
    return None


def check_constraints(field: FieldSchema, value: Any) -> Optional[str]:
    """Kind-specific bound and pattern checks; assumes `check_type` passed."""
    label = field.label
    match field.spec:
        case TextSpec() | SelectSpec():
            if isinstance(value, str):
                return _check_string(field.spec, label, value)
        case NumberSpec(minimum=lo, maximum=hi):
            if lo is not None and value < lo:
                return f"{label} must be at least {format_bound(lo)}"
            if hi is not None and value > hi:
                return f"{label} must be at most {format_bound(hi)}"
        case ArraySpec(min_items=lo, max_items=hi) | MultiSelectSpec(min_items=lo, max_items=hi):
            if lo is not None and len(value) < lo:
                return f"{label} must have at least {lo} items"
            if hi is not None and len(value) > hi:
                return f"{label} must have at most {hi} items"
        case BooleanSpec() | ObjectSpec():
            pass
    return None


def _check_string(spec: TextSpec | SelectSpec, label: str, value: str) -> Optional[str]:
    lo, hi = spec.min_length, spec.max_length
    if lo is not None and len(value) < lo:
        return f"{label} must be at least {lo} characters"
    if hi is not None and len(value) > hi:
        return f"{label} must be at most {hi} characters"
    if spec.regex is not None and not spec.regex.search(value):
        return f"{label} format is invalid"
    return None


def run_custom_validator(field: FieldSchema, value: Any) -> Optional[str]:
    """
    Invoke the field's custom validator, if any.

    A validator that raises is logged and treated as having found nothing.
    """
    fn = field.custom_validator
    if fn is None:
        return None
    try:
        result = fn(value)
    except Exception:
        logger.warning("Custom validator failed", field_key=field.key, exc_info=True)
        return None
    return result or None
