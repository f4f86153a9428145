#!/usr/bin/env python3
"""
Purpose:
    Extension hooks for metadata schemas. Plugins register a bundle of
    optional callbacks; the manager dispatches lifecycle notifications and
    collects validation errors, isolating each callback so one failing
    plugin cannot break another.
"""
from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from promptmeta.core.logging import get_logger

if TYPE_CHECKING:
    from promptmeta.core.schema.named_schema import NamedSchema

logger = get_logger(__name__)


# --- Data model --- #

@dataclass(eq=False)
class HookCallbacks:
    """
    One plugin's hook bundle. Every callback is optional.

    - on_metadata_schema_register(schema): after a schema is registered
    - on_metadata_schema_unregister(name): after a schema name is unregistered
    - on_metadata_validate(metadata) -> {field_key: message}: extra errors
    """
    on_metadata_schema_register: Optional[Callable[[Any], None]] = None
    on_metadata_schema_unregister: Optional[Callable[[str], None]] = None
    on_metadata_validate: Optional[Callable[[Mapping[str, Any]], Mapping[str, str]]] = None


# --- Manager --- #

class HooksManager:
    """Ordered collection of hook bundles; dispatch follows registration order."""

    def __init__(self) -> None:
        self._callbacks: List[HookCallbacks] = []
        self._lock = threading.Lock()

    def register(self, callbacks: HookCallbacks) -> Callable[[], None]:
        """
        Add a hook bundle.

        Returns:
            A function that removes this bundle again; calling it twice is harmless.
        """
        with self._lock:
            self._callbacks.append(callbacks)

        def unregister() -> None:
            with self._lock:
                if callbacks in self._callbacks:
                    self._callbacks.remove(callbacks)

        return unregister

    @property
    def callbacks(self) -> List[HookCallbacks]:
        """Snapshot of registered bundles."""
        with self._lock:
            return list(self._callbacks)

    # --- Dispatch --- #

    def execute_schema_register(self, schema: NamedSchema) -> None:
        for cb in self.callbacks:
            if cb.on_metadata_schema_register is None:
                continue
            try:
                cb.on_metadata_schema_register(schema)
            except Exception:
                logger.warning("Hook on_metadata_schema_register error", schema=schema.name, exc_info=True)

    def execute_schema_unregister(self, name: str) -> None:
        for cb in self.callbacks:
            if cb.on_metadata_schema_unregister is None:
                continue
            try:
                cb.on_metadata_schema_unregister(name)
            except Exception:
                logger.warning("Hook on_metadata_schema_unregister error", schema=name, exc_info=True)

    def execute_validate(self, metadata: Mapping[str, Any]) -> Dict[str, str]:
        """
        Collect errors from every validation hook.

        Hooks run in registration order and later hooks overwrite earlier ones
        for the same key. A hook that raises, or returns something other than
        a mapping, contributes nothing. Entries whose message is None or "" mean
        "no error" for that key and are skipped.
        """
        errors: Dict[str, str] = {}
        for cb in self.callbacks:
            if cb.on_metadata_validate is None:
                continue
            try:
                contributed = cb.on_metadata_validate(metadata)
            except Exception:
                logger.warning("Hook on_metadata_validate error", exc_info=True)
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, Mapping):
                logger.warning("Hook on_metadata_validate returned a non-mapping", type=type(contributed).__name__)
                continue
            errors.update({str(k): str(v) for k, v in contributed.items() if v is not None and v != ""})
        return errors
