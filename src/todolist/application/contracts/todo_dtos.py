from __future__ import annotations

from dataclasses import dataclass

from todolist.domain.todo.entities.todo import TodoItem


@dataclass(frozen=True)
class CreateTodoRequest:
    title: str


@dataclass(frozen=True)
class ToggleTodoRequest:
    todo_id: str


@dataclass(frozen=True)
class RemoveTodoRequest:
    todo_id: str


@dataclass(frozen=True)
class ListTodosRequest:
    filter_text: str = ""


@dataclass(frozen=True)
class TodoItemDto:
    id: str
    title: str
    is_completed: bool

    @classmethod
    def from_item(cls, item: TodoItem) -> "TodoItemDto":
        return cls(id=item.id, title=item.title, is_completed=item.is_completed)
