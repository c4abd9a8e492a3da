"""Task storage interface and an in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskapi.model import Task


class TaskNotFoundError(LookupError):
    """Raised when no task has the requested identifier."""

    def __init__(self, message: str = "task not found") -> None:
        super().__init__(message)


class TaskRepository(ABC):
    """Storage for tasks."""

    @abstractmethod
    def create(self, task: Task) -> None:
        """Store a task."""

    @abstractmethod
    def find_all(self) -> list[Task]:
        """Return every stored task."""

    @abstractmethod
    def find_by_id(self, task_id: str) -> Task:
        """Return the task with the given id or raise TaskNotFoundError."""


class InMemoryTaskRepository(TaskRepository):
    """Keeps tasks in a dictionary keyed by id; a new task replaces one with the same id."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def create(self, task: Task) -> None:
        self._tasks[task.id] = task

    def find_all(self) -> list[Task]:
        return list(self._tasks.values())

    def find_by_id(self, task_id: str) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError() from None