from __future__ import annotations

from typing import Dict, Mapping, Optional

from todolist.domain.storage.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Simple in-memory key-value store backed by a dict."""

    def __init__(self, initial_items: Optional[Mapping[str, bytes]] = None) -> None:
        self._items: Dict[str, bytes] = {}
        if initial_items:
            for key, data in initial_items.items():
                self.set(key, data)

    def get(self, key: str) -> bytes | None:
        return self._items.get(key)

    def set(self, key: str, data: bytes) -> None:
        self._items[key] = bytes(data)

    def delete(self, key: str) -> None:
        self._items.pop(key, None)

    def exists(self, key: str) -> bool:
        return key in self._items
