"""Task repository backed by a MongoDB collection."""

from __future__ import annotations

from typing import Any

import pymongo

from taskapi.model import Task
from taskapi.repository import TaskNotFoundError, TaskRepository

_TIMEOUT_SECONDS = 5


class MongoTaskRepository(TaskRepository):
    """Stores tasks as documents in the ``tasks`` collection of the ``goapi`` database."""

    def __init__(self, client: Any, database: str = "goapi", collection: str = "tasks") -> None:
        self._collection = client[database][collection]

    def create(self, task: Task) -> None:
        with pymongo.timeout(_TIMEOUT_SECONDS):
            self._collection.insert_one(task.to_dict())

    def find_all(self) -> list[Task]:
        with pymongo.timeout(_TIMEOUT_SECONDS):
            return [Task.from_dict(doc) for doc in self._collection.find({})]

    def find_by_id(self, task_id: str) -> Task:
        with pymongo.timeout(_TIMEOUT_SECONDS):
            try:
                doc = self._collection.find_one({"id": task_id})
            except Exception as exc:
                raise TaskNotFoundError() from exc
        if doc is None:
            raise TaskNotFoundError()
        return Task.from_dict(doc)