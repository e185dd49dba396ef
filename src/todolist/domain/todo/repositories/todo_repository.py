from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from todolist.domain.todo.entities.todo import TodoItem


@runtime_checkable
class TodoRepository(Protocol):
    """Persists the whole todo list as one snapshot."""

    def save_all(self, todos: Sequence[TodoItem]) -> None:
        ...

    def load_all(self) -> Optional[list[TodoItem]]:
        """Return the stored list, or ``None`` when nothing was saved yet."""
        ...
