from __future__ import annotations

from dataclasses import dataclass, field, replace
from uuid import uuid4

from todolist.domain.todo.exceptions.todo_exceptions import TodoTitleEmptyError


def new_todo_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class TodoItem:
    title: str
    is_completed: bool = False
    id: str = field(default_factory=new_todo_id)

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise TodoTitleEmptyError("Todo title must not be empty.")

    def toggled(self) -> TodoItem:
        return replace(self, is_completed=not self.is_completed)

    def matches(self, filter_text: str) -> bool:
        needle = filter_text.lower()
        return not needle or needle in self.title.lower()
