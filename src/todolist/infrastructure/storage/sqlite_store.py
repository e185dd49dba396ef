from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import Column, LargeBinary
from sqlalchemy.engine import Engine
from sqlmodel import Field, Session, SQLModel, create_engine

from todolist.domain.storage.key_value_store import KeyValueStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueEntry(SQLModel, table=True):
    key: str = Field(primary_key=True)
    value: bytes = Field(sa_column=Column(LargeBinary, nullable=False))
    updated_at: datetime = Field(default_factory=_utcnow)


class SqliteKeyValueStore(KeyValueStore):
    def __init__(self, url: str = "sqlite:///data/todolist.db", *, engine: Optional[Engine] = None) -> None:
        self._engine = engine or create_engine(url)
        SQLModel.metadata.create_all(self._engine, tables=[KeyValueEntry.__table__])

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with Session(self._engine) as session:
            yield session

    def get(self, key: str) -> bytes | None:
        with self._session() as session:
            entry = session.get(KeyValueEntry, key)
            return bytes(entry.value) if entry is not None else None

    def set(self, key: str, data: bytes) -> None:
        with self._session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                entry = KeyValueEntry(key=key, value=bytes(data))
            else:
                entry.value = bytes(data)
                entry.updated_at = _utcnow()
            session.add(entry)
            session.commit()

    def delete(self, key: str) -> None:
        with self._session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is not None:
                session.delete(entry)
                session.commit()
