from __future__ import annotations

from todolist.application.todo.store import TodoStore
from todolist.infrastructure.data.repositories.key_value_todo_repository import (
    KeyValueTodoRepository,
)
from todolist.infrastructure.storage.in_memory_store import InMemoryKeyValueStore
from todolist.presentation.controllers.todo_controller import (
    EMPTY_STATE_TEXT,
    EMPTY_TITLE_MESSAGE,
    Notice,
    TodoListController,
)


def test_controller_starts_empty_with_empty_state(todo_store) -> None:
    controller = TodoListController(todo_store)

    assert controller.start() is None
    assert controller.rows() == []
    assert controller.empty_state_text() == EMPTY_STATE_TEXT


def test_controller_add_toggle_remove_rows(todo_store) -> None:
    controller = TodoListController(todo_store)
    controller.start()

    assert controller.add_todo("Buy milk") is None
    assert controller.add_todo("Walk dog") is None
    dog_id = controller.rows()[1]["id"]
    assert controller.toggle_todo(dog_id) is None

    assert controller.rows() == [
        {
            "id": controller.rows()[0]["id"],
            "title": "Buy milk",
            "is_completed": False,
            "strikethrough": False,
            "accessory": "none",
        },
        {
            "id": dog_id,
            "title": "Walk dog",
            "is_completed": True,
            "strikethrough": True,
            "accessory": "checkmark",
        },
    ]
    assert controller.empty_state_text() is None

    controller.remove_todo(controller.rows()[0]["id"])
    assert [row["title"] for row in controller.rows()] == ["Walk dog"]


def test_controller_search_filters_rows(todo_store) -> None:
    controller = TodoListController(todo_store)
    controller.add_todo("Buy milk")
    controller.add_todo("Walk dog")

    controller.search("WALK")
    assert [row["title"] for row in controller.rows()] == ["Walk dog"]

    controller.search("")
    assert [row["title"] for row in controller.rows()] == ["Buy milk", "Walk dog"]


def test_controller_toggles_by_id_while_filtered(todo_store) -> None:
    controller = TodoListController(todo_store)
    controller.add_todo("Buy milk")
    controller.add_todo("Walk dog")
    controller.search("dog")

    controller.toggle_todo(controller.rows()[0]["id"])

    assert [item.is_completed for item in todo_store.list()] == [False, True]


def test_controller_rejects_blank_title_with_notice(todo_store) -> None:
    controller = TodoListController(todo_store)

    notice = controller.add_todo("   ")

    assert isinstance(notice, Notice)
    assert notice.message == EMPTY_TITLE_MESSAGE
    assert notice.title == "Error"
    assert len(todo_store) == 0


def test_controller_reports_save_failure_without_losing_item(broken_kv_store) -> None:
    controller = TodoListController(TodoStore(KeyValueTodoRepository(broken_kv_store)))

    notice = controller.add_todo("Buy milk")

    assert notice == Notice(message="Failed to save todos")
    assert [row["title"] for row in controller.rows()] == ["Buy milk"]


def test_controller_reports_load_failure_and_starts_empty() -> None:
    store = TodoStore(KeyValueTodoRepository(InMemoryKeyValueStore({"todos": b"\x00garbage"})))
    controller = TodoListController(store)

    notice = controller.start()

    assert notice == Notice(message="Failed to load todos")
    assert controller.rows() == []


def test_controller_holds_no_copy_of_the_list(todo_store) -> None:
    controller = TodoListController(todo_store)
    todo_store.add("Added behind the controller's back")

    assert [row["title"] for row in controller.rows()] == ["Added behind the controller's back"]
    assert controller.store is todo_store
