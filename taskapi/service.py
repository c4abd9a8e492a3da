"""Business operations on tasks."""

from __future__ import annotations

import uuid

from taskapi.model import Task
from taskapi.repository import TaskRepository


class TaskService:
    """Creates and looks up tasks through a repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def create(self, title: str) -> Task:
        """Create an unfinished task with a fresh random id and return it."""
        task = Task(id=str(uuid.uuid4()), title=title, done=False)
        self._repository.create(task)
        return task

    def list(self) -> list[Task]:
        """Return every task."""
        return self._repository.find_all()

    def get_by_id(self, task_id: str) -> Task:
        """Return one task; raises TaskNotFoundError when it does not exist."""
        return self._repository.find_by_id(task_id)