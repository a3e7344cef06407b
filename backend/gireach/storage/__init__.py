"""Storage package: one interface, a database backend and a JSON-file backend."""

from typing import Optional

from gireach.config import settings
from gireach.storage.base import Storage
from gireach.storage.database_storage import DatabaseStorage
from gireach.storage.file_storage import FileStorage
from gireach.storage.hybrid import DatabaseBackend, FileBackend, HybridStorage, StorageBackend, resolve_backend

_storage: Optional[HybridStorage] = None


def get_storage() -> Storage:
    """FastAPI dependency returning the process-wide storage facade."""
    global _storage
    if _storage is None:
        _storage = HybridStorage(resolve_backend(settings))
    return _storage


__all__ = [
    "Storage", "DatabaseStorage", "FileStorage",
    "DatabaseBackend", "FileBackend", "HybridStorage", "StorageBackend",
    "resolve_backend", "get_storage",
]
