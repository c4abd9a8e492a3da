"""HTTP handlers for logging in and managing tasks."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from taskapi.auth import generate_jwt
from taskapi.service import TaskService


def login_handler() -> Any:
    """Issue a token for the ``user_id`` given in the JSON body."""
    body = request.get_json(force=True, silent=True)
    user_id = body.get("user_id") if isinstance(body, dict) else None
    if not isinstance(user_id, str) or not user_id:
        return jsonify({"error": "Missing user_id"}), 400
    try:
        token = generate_jwt(user_id)
    except Exception:
        return jsonify({"error": "Token generation failed"}), 500
    return jsonify({"token": token}), 200


class TaskHandler:
    """Task endpoints backed by a TaskService."""

    def __init__(self, service: TaskService) -> None:
        self._service = service

    def register_routes(self, app: Flask) -> None:
        """Attach the task endpoints to an application without any authentication."""
        app.add_url_rule("/tasks", "tasks_get_all", self.get_all, methods=["GET"])
        app.add_url_rule("/tasks", "tasks_create", self.create, methods=["POST"])
        app.add_url_rule("/tasks/<id>", "tasks_get_by_id", self.get_by_id, methods=["GET"])

    def get_all(self) -> Any:
        try:
            tasks = self._service.list()
        except Exception as exc:
            return jsonify({"error": str(exc)}), 500
        return jsonify([task.to_dict() for task in tasks]), 200

    def create(self) -> Any:
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "invalid request"}), 400
        title = body.get("title", "")
        if title is None:
            title = ""
        if not isinstance(title, str):
            return jsonify({"error": "invalid request"}), 400
        try:
            self._service.create(title)
        except Exception as exc:
            return jsonify({"error": str(exc)}), 500
        return "", 201

    def get_by_id(self, id: str) -> Any:
        try:
            task = self._service.get_by_id(id)
        except Exception:
            return jsonify({"error": "not found"}), 404
        return jsonify(task.to_dict()), 200