from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.engine import make_url

from todolist.config import Settings
from todolist.domain.storage.key_value_store import KeyValueStore
from todolist.infrastructure.storage.file_store import LocalFileKeyValueStore
from todolist.infrastructure.storage.in_memory_store import InMemoryKeyValueStore
from todolist.infrastructure.storage.sqlite_store import SqliteKeyValueStore


logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(url: str) -> None:
    database = make_url(url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def key_value_store(settings: Settings) -> KeyValueStore:
    backend = settings.storage_backend
    if backend == "memory":
        store: KeyValueStore = InMemoryKeyValueStore()
    elif backend == "file":
        store = LocalFileKeyValueStore(root=settings.storage_root)
    elif backend == "sqlite":
        _ensure_sqlite_dir(settings.database_url)
        store = SqliteKeyValueStore(settings.database_url)
    else:
        raise ValueError(f"Unknown storage backend {backend!r}.")
    logger.info("Using %s key-value store", backend)
    return store
