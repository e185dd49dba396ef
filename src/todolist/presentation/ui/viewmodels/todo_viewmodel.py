from __future__ import annotations

from collections.abc import Iterable

from todolist.application.contracts.todo_dtos import TodoItemDto


def todo_to_viewmodel(todo: TodoItemDto) -> dict[str, str | bool]:
    return {
        "id": todo.id,
        "title": todo.title,
        "is_completed": todo.is_completed,
        "strikethrough": todo.is_completed,
        "accessory": "checkmark" if todo.is_completed else "none",
    }


def todos_to_viewmodels(todos: Iterable[TodoItemDto]) -> list[dict[str, str | bool]]:
    return [todo_to_viewmodel(todo) for todo in todos]
