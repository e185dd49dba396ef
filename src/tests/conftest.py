from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todolist.application.todo.store import TodoStore
from todolist.domain.storage.key_value_store import KeyValueStore
from todolist.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)
from todolist.infrastructure.storage.in_memory_store import InMemoryKeyValueStore


class BrokenKeyValueStore(KeyValueStore):
    """Fails every write, optionally every read."""

    def __init__(self, data: bytes | None = None, fail_reads: bool = False) -> None:
        self.data = data
        self.fail_reads = fail_reads
        self.write_attempts = 0

    def get(self, key: str) -> bytes | None:
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.data

    def set(self, key: str, data: bytes) -> None:
        self.write_attempts += 1
        raise OSError("disk full")

    def delete(self, key: str) -> None:
        raise OSError("disk full")


@pytest.fixture()
def in_memory_kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def todo_store(in_memory_kv_store: InMemoryKeyValueStore) -> TodoStore:
    return TodoStore(KeyValueTodoRepository(in_memory_kv_store))


@pytest.fixture()
def broken_kv_store() -> BrokenKeyValueStore:
    return BrokenKeyValueStore()
