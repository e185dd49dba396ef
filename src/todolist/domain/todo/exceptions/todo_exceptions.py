from __future__ import annotations


class TodoError(Exception):
    pass


class TodoTitleEmptyError(TodoError, ValueError):
    pass


class StorageError(TodoError):
    message = "Storage failure"


class TodoSaveError(StorageError):
    message = "Failed to save todos"


class TodoLoadError(StorageError):
    message = "Failed to load todos"
