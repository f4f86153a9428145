#!/usr/bin/env python3
"""
Purpose:
    Derives the initial metadata object for a new record from field defaults.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Iterable

from promptmeta.core.schema.field_schema import FieldSchema


def default_metadata(fields: Iterable[FieldSchema]) -> Dict[str, Any]:
    """
    Map each field that declares a default to a copy of that default.

    Fields without an explicit default are omitted, so a missing key means
    "no opinion" rather than an empty value. When keys repeat, the later
    field's default is the one kept.
    """
    result: Dict[str, Any] = {}
    for fs in fields:
        if fs.has_default:
            result[fs.key] = copy.deepcopy(fs.default)
    return result
