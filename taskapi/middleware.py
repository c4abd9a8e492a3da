"""Request hooks for CORS, access logging and a fixed bearer token check."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from datetime import datetime
from typing import Any

from flask import Flask, Response, g, jsonify, request

ALLOW_ORIGIN = "*"
ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Origin, Content-Type, Authorization"

STATIC_BEARER_TOKEN = "secret"

access_logger = logging.getLogger("taskapi.access")

_TIMESTAMP_FORMAT = "%Y/%m/%d - %H:%M:%S"


def register_cors(app: Flask) -> None:
    """Add permissive CORS headers to every response and answer preflight requests with 204."""

    @app.before_request
    def _answer_preflight() -> Response | None:
        if request.method == "OPTIONS":
            return app.response_class(status=204)
        return None

    @app.after_request
    def _add_cors_headers(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = ALLOW_ORIGIN
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response


def _format_duration(seconds: float) -> str:
    nanos = round(seconds * 1e9)
    if nanos < 1_000:
        return f"{nanos}ns"
    if nanos < 1_000_000:
        return f"{nanos / 1e3:g}µs"
    if nanos < 1_000_000_000:
        return f"{nanos / 1e6:g}ms"
    return f"{nanos / 1e9:g}s"


def register_logger(app: Flask) -> None:
    """Log one line per handled request with time, status, latency, method and path."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        started = g.pop("request_started", None)
        if started is None:
            return response
        latency = time.perf_counter() - started
        access_logger.info(
            "[GIN] %s | %3d | %13s | %s | %s",
            datetime.now().strftime(_TIMESTAMP_FORMAT),
            response.status_code,
            _format_duration(latency),
            request.method,
            request.path,
        )
        return response


def static_token_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Reject requests whose Authorization header is not the fixed bearer token."""

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if request.headers.get("Authorization", "") != f"Bearer {STATIC_BEARER_TOKEN}":
            return jsonify({"error": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper