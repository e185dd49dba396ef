from __future__ import annotations

from typing import List, Sequence
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from todolist.domain.todo.entities.todo import TodoItem


class TodoRecord(BaseModel):
    """Wire shape of one todo, as stored under the ``todos`` key."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: UUID
    title: str = Field(min_length=1)
    is_completed: bool = Field(alias="isCompleted", strict=True)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @classmethod
    def from_item(cls, item: TodoItem) -> "TodoRecord":
        return cls(id=UUID(item.id), title=item.title, is_completed=item.is_completed)

    def to_item(self) -> TodoItem:
        return TodoItem(id=str(self.id), title=self.title, is_completed=self.is_completed)


_RECORDS = TypeAdapter(List[TodoRecord])


class DuplicateTodoIdError(ValueError):
    pass


def encode_todos(todos: Sequence[TodoItem]) -> bytes:
    records = [TodoRecord.from_item(item) for item in todos]
    return _RECORDS.dump_json(records, by_alias=True)


def decode_todos(data: bytes) -> list[TodoItem]:
    records = _RECORDS.validate_json(data)
    items = [record.to_item() for record in records]
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            raise DuplicateTodoIdError(f"Duplicate todo id {item.id}")
        seen.add(item.id)
    return items
