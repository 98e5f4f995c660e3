"""Process-wide table of named debug switches.

The table is created on first use, seeded from ``BEHOLD_CONTEXT``, and then
shared by every thread for the rest of the process. Unknown keys read as
``False``.
"""
from __future__ import annotations
import threading
from typing import Dict, Mapping, Optional
from behold.config import BeholdConfig
from behold.core.logging import logger

class ContextStore:
    def __init__(self):
        self._values: Dict[str, bool] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bool:
        with self._lock:
            return self._values.get(key, False)

    def set(self, key: str, value: bool):
        with self._lock:
            self._values[key] = bool(value)
        logger.debug("ContextSet", key=key, value=bool(value))

    def clear(self, key: str):
        with self._lock:
            self._values.pop(key, None)
        logger.debug("ContextCleared", key=key)

    def update(self, values: Mapping[str, bool]):
        with self._lock:
            for key, value in values.items():
                self._values[key] = bool(value)

    def snapshot(self) -> Dict[str, bool]:
        with self._lock:
            return dict(self._values)

_store: Optional[ContextStore] = None
_store_lock = threading.Lock()

def get_store() -> ContextStore:
    """Return the global store, creating it exactly once."""
    global _store
    store = _store
    if store is not None:
        return store
    with _store_lock:
        if _store is None:
            config = BeholdConfig.load()
            config.apply()
            store = ContextStore()
            store.update(config.context)
            logger.debug("ContextStoreCreated", seeded=len(config.context))
            _store = store
        return _store

def set_context(key: str, value: bool):
    get_store().set(key, value)

def get_context(key: str) -> bool:
    return get_store().get(key)

def clear_context(key: str):
    get_store().clear(key)
