import pytest

from taskapi.app import create_app, main
from taskapi.repository import InMemoryTaskRepository


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def client(repo):
    return create_app(repo).test_client()


def auth_header(client):
    issued = client.post("/login", json={"user_id": "alice"}).get_json()["token"]
    return {"Authorization": f"Bearer {issued}"}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_tasks_require_header(client):
    resp = client.get("/tasks")
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Authorization header missing or invalid"}


def test_tasks_reject_bad_token(client):
    resp = client.get("/tasks", headers={"Authorization": "Bearer token"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid token"}


def test_create_then_list_and_fetch(client, repo):
    headers = auth_header(client)
    created = client.post("/tasks", json={"title": "buy milk"}, headers=headers)
    assert created.status_code == 201

    listed = client.get("/tasks", headers=headers)
    assert listed.status_code == 200
    tasks = listed.get_json()
    assert [t["title"] for t in tasks] == ["buy milk"]

    task_id = tasks[0]["id"]
    fetched = client.get(f"/tasks/{task_id}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.get_json() == {"id": task_id, "title": "buy milk", "done": False}
    assert repo.find_by_id(task_id).title == "buy milk"


def test_unknown_task_not_found(client):
    resp = client.get("/tasks/missing", headers=auth_header(client))
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "not found"}


def test_preflight_skips_auth(client):
    resp = client.open("/tasks", method="OPTIONS")
    assert resp.status_code == 204


def test_login_missing_user(client):
    resp = client.post("/login", json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing user_id"}


def test_main_rejects_unknown_backend():
    with pytest.raises(SystemExit) as info:
        main(["--backend", "bogus"])
    assert info.value.code == 2


def test_main_sql_needs_url():
    with pytest.raises(SystemExit) as info:
        main(["--backend", "sql"])
    assert "--database-url" in str(info.value.code)