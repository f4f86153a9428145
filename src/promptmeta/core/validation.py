#!/usr/bin/env python3
"""
Purpose:
    The outcome of validating one metadata object: per-field error and
    warning messages, with `valid` derived from the error map.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping


@dataclass
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)
    warnings: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        """True when no field has an error."""
        return not self.errors

    def add(self, key: str, message: str) -> None:
        """Record `message` for `key`, replacing any earlier error for it."""
        self.errors[key] = message

    def merge(self, errors: Mapping[str, str]) -> None:
        """Overlay externally-contributed errors; later entries win per key."""
        for key, message in errors.items():
            self.add(str(key), str(message))

    def is_valid(self) -> bool:
        return self.valid

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.errors)

    def __repr__(self) -> str:
        return f"<ValidationResult valid={self.valid} errors={len(self.errors)}>"
