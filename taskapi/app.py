"""Application assembly and the command that serves it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from flask import Flask, jsonify

from taskapi.auth import jwt_required
from taskapi.handlers import TaskHandler, login_handler
from taskapi.middleware import register_cors, register_logger
from taskapi.repository import InMemoryTaskRepository, TaskRepository
from taskapi.service import TaskService

DEFAULT_PORT = 8080
DEFAULT_MONGO_URI = "mongodb://localhost:27017"


def _health():
    return jsonify({"status": "ok"}), 200


def create_app(repository: TaskRepository) -> Flask:
    """Build the application: public health and login routes, token-protected task routes."""
    app = Flask("taskapi")
    register_cors(app)
    register_logger(app)

    app.add_url_rule("/health", "health", _health, methods=["GET"])
    app.add_url_rule("/login", "login", login_handler, methods=["POST"])

    handler = TaskHandler(TaskService(repository))
    app.add_url_rule("/tasks", "create_task", jwt_required(handler.create), methods=["POST"])
    app.add_url_rule("/tasks", "list_tasks", jwt_required(handler.get_all), methods=["GET"])
    app.add_url_rule(
        "/tasks/<id>", "get_task", jwt_required(handler.get_by_id), methods=["GET"]
    )
    return app


def _build_repository(args: argparse.Namespace) -> TaskRepository:
    if args.backend == "mongo":
        import pymongo

        from taskapi.mongo_repository import MongoTaskRepository

        return MongoTaskRepository(pymongo.MongoClient(args.mongo_uri))
    if args.backend == "sql":
        from sqlalchemy import create_engine

        from taskapi.sql_repository import SqlTaskRepository

        if not args.database_url:
            raise SystemExit("--database-url is required for the sql backend")
        return SqlTaskRepository(create_engine(args.database_url))
    return InMemoryTaskRepository()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="taskapi", description="Serve the task API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--backend", choices=["mongo", "sql", "memory"], default="mongo")
    parser.add_argument("--mongo-uri", default=DEFAULT_MONGO_URI)
    parser.add_argument("--database-url", default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse command-line options, connect the storage backend and serve the API."""
    args = _parse_args(argv)
    app = create_app(_build_repository(args))
    app.run(host=args.host, port=args.port)