from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from todolist.logging_setup import resolve_log_level


STORAGE_BACKENDS = ("memory", "file", "sqlite")


def _env(name: str, default: str) -> str:
    return (os.getenv(name, default) or default).strip()


@dataclass(frozen=True)
class Settings:
    storage_backend: str = "file"
    storage_root: Path = Path("./data/storage")
    database_url: str = "sqlite:///data/todolist.db"
    log_dir: Path = Path("./data/logs")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        backend = _env("TODOLIST_STORAGE_BACKEND", cls.storage_backend).lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend {backend!r}, expected one of {', '.join(STORAGE_BACKENDS)}."
            )
        # TODOLIST_DEBUG=1 wins over an explicit level.
        if os.getenv("TODOLIST_DEBUG") == "1":
            log_level = "DEBUG"
        else:
            log_level = _env("TODOLIST_LOG_LEVEL", cls.log_level).upper()
            resolve_log_level(log_level)
        return cls(
            storage_backend=backend,
            storage_root=Path(_env("TODOLIST_STORAGE_ROOT", str(cls.storage_root))),
            database_url=_env("TODOLIST_DATABASE_URL", cls.database_url),
            log_dir=Path(_env("TODOLIST_LOG_DIR", str(cls.log_dir))),
            log_level=log_level,
        )
