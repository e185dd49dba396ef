from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from todolist.domain.storage.key_value_store import KeyValueStore


_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
_SUFFIX = ".bin"


def _validate_key(key: str) -> None:
    if not key or key in {".", ".."} or not _KEY_PATTERN.match(key):
        raise ValueError(f"Invalid storage key: {key!r}")


class LocalFileKeyValueStore(KeyValueStore):
    """Stores each key as one file below ``root``."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root)

    def _full_path(self, key: str) -> Path:
        _validate_key(key)
        root = self._root.resolve()
        path = (root / f"{key}{_SUFFIX}").resolve()
        if path.parent != root:
            raise ValueError(f"Invalid storage key: {key!r}")
        return path

    def get(self, key: str) -> bytes | None:
        path = self._full_path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, data: bytes) -> None:
        path = self._full_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", dir=path.parent)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def delete(self, key: str) -> None:
        path = self._full_path(key)
        if path.exists():
            path.unlink()

    def exists(self, key: str) -> bool:
        return self._full_path(key).exists()
