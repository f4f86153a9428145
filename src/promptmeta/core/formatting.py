#!/usr/bin/env python3
"""
Formatting helpers for promptmeta.

- Turns a pydantic `ValidationError` raised while parsing a plugin manifest
  into one line per problem, with paths that name the offending field by key.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

# Prefix pydantic puts in front of ValueError messages raised by our validators
_VALUE_ERROR_PREFIX = "Value error, "


# --- Public API --- #

def format_manifest_errors(exc: ValidationError, payload: Optional[Mapping[str, Any]] = None) -> List[str]:
    """
    Return one line per error in `exc`.

    When the raw `payload` is given, list indices that point at a field are
    annotated with that field's key, so

        metadataSchema.fields[1](apiVersion).label: Field required

    reads as "the `label` of field `apiVersion`".
    """
    msgs: List[str] = []
    for err in exc.errors():
        path = _format_error_loc(err.get("loc", ()), payload)
        msgs.append(f"{path}: {_clean_message(err.get('msg', 'Validation error'))}")
    return msgs or [str(exc).splitlines()[0]]


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any], payload: Optional[Mapping[str, Any]] = None) -> str:
    """
    Convert a pydantic error `loc` into a dotted path, following `payload`
    alongside to pick up field keys.

    Examples:
        ('metadataSchema', 'fields', 1, 'key') -> "metadataSchema.fields[1].key"
        (0, 'label')                           -> "[0].label"
        ()                                     -> "<root>"
    """
    parts: List[str] = []
    node: Any = payload
    for seg in loc:
        if isinstance(seg, int):
            node = _item(node, seg)
            index = f"[{seg}]{_key_suffix(node)}"
            if parts:
                parts[-1] += index
            else:
                parts.append(index)
        else:
            node = node.get(seg) if isinstance(node, Mapping) else None
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"


def _item(node: Any, index: int) -> Any:
    if isinstance(node, Sequence) and not isinstance(node, str) and 0 <= index < len(node):
        return node[index]
    return None


def _key_suffix(node: Any) -> str:
    key = node.get("key") if isinstance(node, Mapping) else None
    return f"({key})" if isinstance(key, str) and key.strip() else ""


def _clean_message(msg: str) -> str:
    return msg[len(_VALUE_ERROR_PREFIX):] if msg.startswith(_VALUE_ERROR_PREFIX) else msg
