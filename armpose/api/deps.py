# armpose/api/deps.py
"""
Dependency injection for API routes.
"""
from threading import Lock
from typing import Optional

from ..core import PoseStore
from ..config import StoreConfig

# Global store instance
_store: Optional[PoseStore] = None
_store_lock = Lock()


def get_store() -> PoseStore:
    """Get the global pose store, building one from the environment if unset."""
    global _store
    with _store_lock:
        if _store is None:
            _store = PoseStore(StoreConfig.from_env())
        return _store


def set_store(store: Optional[PoseStore]):
    """Set the global pose store (called during app startup)."""
    global _store
    with _store_lock:
        _store = store
