"""Task repository backed by a relational database through SQLAlchemy."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, MetaData, String, Table, insert, select
from sqlalchemy.engine import Engine

from taskapi.model import Task
from taskapi.repository import TaskNotFoundError, TaskRepository

metadata = MetaData()

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=False, default=""),
    Column("done", Boolean, nullable=False, default=False),
)


class SqlTaskRepository(TaskRepository):
    """Stores tasks in a ``tasks`` table."""

    def __init__(self, engine: Engine, create_schema: bool = True) -> None:
        self._engine = engine
        if create_schema:
            metadata.create_all(engine)

    def create(self, task: Task) -> None:
        with self._engine.begin() as conn:
            conn.execute(insert(tasks_table).values(**task.to_dict()))

    def find_all(self) -> list[Task]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(tasks_table)).mappings()
            return [Task.from_dict(row) for row in rows]

    def find_by_id(self, task_id: str) -> Task:
        query = (
            select(tasks_table)
            .where(tasks_table.c.id == task_id)
            .order_by(tasks_table.c.id)
            .limit(1)
        )
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            raise TaskNotFoundError("record not found")
        return Task.from_dict(row)