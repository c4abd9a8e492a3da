"""Issuing and checking signed bearer tokens."""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from flask import g, jsonify, request

JWT_SECRET = "secret"
TOKEN_LIFETIME = timedelta(hours=24)

_ALGORITHM = "HS256"
_ACCEPTED_ALGORITHMS = ["HS256", "HS384", "HS512"]
_BEARER_PREFIX = "Bearer "


class InvalidTokenError(Exception):
    """Raised when a token is malformed, badly signed or expired."""


@dataclass(frozen=True)
class CustomClaims:
    """Claims carried by an access token."""

    user_id: str
    expires_at: datetime | None = None
    issued_at: datetime | None = None


def _to_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


def generate_jwt(user_id: str) -> str:
    """Return a signed token for the user, valid for 24 hours."""
    now = datetime.now(tz=timezone.utc)
    payload = {"user_id": user_id, "exp": now + TOKEN_LIFETIME, "iat": now}
    return jwt.encode(payload, JWT_SECRET, algorithm=_ALGORITHM)


def parse_jwt(token: str) -> CustomClaims:
    """Verify a token and return its claims."""
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=_ACCEPTED_ALGORITHMS)
    except jwt.PyJWTError as exc:
        raise InvalidTokenError(str(exc)) from exc
    return CustomClaims(
        user_id=str(payload.get("user_id", "")),
        expires_at=_to_datetime(payload.get("exp")),
        issued_at=_to_datetime(payload.get("iat")),
    )


def jwt_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Reject requests without a valid bearer token; store the user id in ``g.user_id``."""

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        header = request.headers.get("Authorization", "")
        if not header.startswith(_BEARER_PREFIX):
            return jsonify({"error": "Authorization header missing or invalid"}), 401
        try:
            claims = parse_jwt(header[len(_BEARER_PREFIX):])
        except InvalidTokenError:
            return jsonify({"error": "Invalid token"}), 401
        g.user_id = claims.user_id
        return view(*args, **kwargs)

    return wrapper