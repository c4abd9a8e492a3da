import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError

from taskapi.model import Task
from taskapi.repository import TaskNotFoundError
from taskapi.sql_repository import SqlTaskRepository


@pytest.fixture
def repo():
    engine = create_engine("sqlite://")
    yield SqlTaskRepository(engine)
    engine.dispose()


def test_create_then_find_by_id(repo):
    task = Task(id="1", title="one", done=True)
    repo.create(task)
    assert repo.find_by_id("1") == task


def test_find_all_returns_every_task(repo):
    tasks = [Task(id="a", title="A"), Task(id="b", title="B", done=True)]
    for task in tasks:
        repo.create(task)
    assert sorted(repo.find_all(), key=lambda t: t.id) == tasks


def test_find_all_empty(repo):
    assert repo.find_all() == []


def test_missing_task_raises_not_found(repo):
    with pytest.raises(TaskNotFoundError, match="record not found"):
        repo.find_by_id("missing")


def test_duplicate_id_is_rejected(repo):
    repo.create(Task(id="dup", title="first"))
    with pytest.raises(IntegrityError):
        repo.create(Task(id="dup", title="second"))
    assert repo.find_by_id("dup").title == "first"