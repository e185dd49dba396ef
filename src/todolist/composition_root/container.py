from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from todolist.application.todo.commands.create_todo import CreateTodoCommand
from todolist.application.todo.commands.remove_todo import RemoveTodoCommand
from todolist.application.todo.commands.toggle_todo import ToggleTodoCommand
from todolist.application.todo.queries.list_todos import ListTodosQuery
from todolist.application.todo.store import TodoStore
from todolist.config import Settings
from todolist.domain.storage.key_value_store import KeyValueStore
from todolist.env import load_env
from todolist.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)
from todolist.infrastructure.storage.factory import key_value_store
from todolist.logging_setup import setup_logging
from todolist.presentation.controllers.todo_controller import TodoListController


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    key_value_store: KeyValueStore
    repository: KeyValueTodoRepository
    store: TodoStore
    create_todo_command: CreateTodoCommand
    toggle_todo_command: ToggleTodoCommand
    remove_todo_command: RemoveTodoCommand
    list_todos_query: ListTodosQuery
    controller: TodoListController


def create_app_container(
    settings: Optional[Settings] = None,
    *,
    kv_store: Optional[KeyValueStore] = None,
) -> AppContainer:
    if settings is None:
        load_env()
        settings = Settings.from_env()
    setup_logging(settings.log_dir, level=settings.log_level)

    kv_store = kv_store if kv_store is not None else key_value_store(settings)
    repository = KeyValueTodoRepository(kv_store)
    store = TodoStore(repository)

    return AppContainer(
        settings=settings,
        key_value_store=kv_store,
        repository=repository,
        store=store,
        create_todo_command=CreateTodoCommand(store),
        toggle_todo_command=ToggleTodoCommand(store),
        remove_todo_command=RemoveTodoCommand(store),
        list_todos_query=ListTodosQuery(store),
        controller=TodoListController(store),
    )
