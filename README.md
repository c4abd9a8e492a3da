# taskapi

A small JSON API for managing tasks, built on Flask. Clients log in with a
user id to get a signed JWT, then send that token to create and read tasks.
Tasks can be stored in memory, in MongoDB or in any SQL database that
SQLAlchemy supports.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Running the server

```
taskapi
```

By default this serves on `0.0.0.0:8080` with MongoDB storage at
`mongodb://localhost:27017` (database `goapi`, collection `tasks`). Options:

| Option           | Default                     | Meaning                                  |
|------------------|-----------------------------|------------------------------------------|
| `--host`         | `0.0.0.0`                   | Address to listen on                     |
| `--port`         | `8080`                      | Port to listen on                        |
| `--backend`      | `mongo`                     | One of `mongo`, `sql`, `memory`          |
| `--mongo-uri`    | `mongodb://localhost:27017` | MongoDB connection URI                   |
| `--database-url` | none                        | SQLAlchemy URL, required for `sql`       |

For example, to keep tasks in memory only:

```
taskapi --backend memory --port 5000
```

The server is Flask's built-in development server.

## Endpoints

| Method | Path          | Auth       | Description                                          |
|--------|---------------|------------|------------------------------------------------------|
| GET    | `/health`     | none       | Returns `{"status": "ok"}`                           |
| POST   | `/login`      | none       | Body `{"user_id": "..."}`, returns `{"token": "..."}` |
| POST   | `/tasks`      | Bearer JWT | Body `{"title": "..."}`, returns 201 with no body    |
| GET    | `/tasks`      | Bearer JWT | Lists all tasks                                      |
| GET    | `/tasks/<id>` | Bearer JWT | Returns one task, or 404 with `{"error": "not found"}` |

Each task is a JSON object with the fields `id`, `title` and `done`. A new task
gets a random UUID as its id and starts with `done` set to `false`.

`/login` answers 400 with `{"error": "Missing user_id"}` when the body has no
non-empty string `user_id`. `POST /tasks` answers 400 with
`{"error": "invalid request"}` when the body is not a JSON object or its
`title` is not a string; a missing title becomes an empty one.

Protected routes expect the header `Authorization: Bearer ` followed by the
token returned from `/login`. Without that header, or with a header in a
different form, the response is 401 with
`{"error": "Authorization header missing or invalid"}`. If the token is
present but invalid or expired, the response is 401 with
`{"error": "Invalid token"}`. Tokens are valid for 24 hours and are signed
with HS256 using the key in `taskapi.auth.JWT_SECRET`.

Every response carries permissive CORS headers, and any `OPTIONS` request is
answered with 204 at once. Each request is logged at INFO level on the
`taskapi.access` logger with its time, status, latency, method and path.

## Using it as a library

`taskapi.app.create_app(repository)` builds the Flask application around any
repository, which is handy with Flask's test client:

```python
from taskapi.app import create_app
from taskapi.repository import InMemoryTaskRepository

app = create_app(InMemoryTaskRepository())
client = app.test_client()

login = client.post("/login", json={"user_id": "alice"})
print(login.get_json())
```

The service layer can be used without HTTP:

```python
from taskapi.repository import InMemoryTaskRepository, TaskNotFoundError
from taskapi.service import TaskService

service = TaskService(InMemoryTaskRepository())
created = service.create("Buy milk")
for task in service.list():
    print(task.id, task.title, task.done)

try:
    service.get_by_id("missing")
except TaskNotFoundError:
    print("no such task")
```

The storage backends all implement `TaskRepository` (`create`, `find_all`,
`find_by_id`):

- `InMemoryTaskRepository` in `taskapi.repository`
- `MongoTaskRepository(client, database="goapi", collection="tasks")` in
  `taskapi.mongo_repository`
- `SqlTaskRepository(engine, create_schema=True)` in `taskapi.sql_repository`,
  which creates a `tasks` table unless told not to

`find_by_id` raises `TaskNotFoundError` when there is no such task.

Tokens can be made and checked directly with `generate_jwt` and `parse_jwt`
from `taskapi.auth`. `parse_jwt` returns a `CustomClaims` with `user_id`,
`expires_at` and `issued_at`, and raises `InvalidTokenError` for a token that
is malformed, expired or signed with another key. The `jwt_required`
decorator protects any Flask view and stores the user id in `g.user_id`.

`taskapi.handlers.TaskHandler.register_routes(app)` attaches the task routes
without authentication, and `taskapi.middleware` offers `register_cors`,
`register_logger` and `static_token_required`, a decorator that accepts only
one fixed bearer value.

## What it does not do

Tasks can only be created and read: there is no route to update, complete or
delete them. Login takes any user id without checking a password. No
interactive API documentation is served.