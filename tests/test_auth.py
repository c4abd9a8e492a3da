from datetime import datetime, timedelta, timezone

import jwt
import pytest
from flask import Flask, g

from taskapi import auth
from taskapi.auth import InvalidTokenError, generate_jwt, jwt_required, parse_jwt


def _me():
    return {"user_id": g.user_id}


def _client_for(view):
    app = Flask(__name__)
    app.add_url_rule("/me", endpoint="me", view_func=view, methods=["GET"])
    return app.test_client()


def test_round_trip_keeps_user_id():
    assert parse_jwt(generate_jwt("user-1")).user_id == "user-1"


def test_token_lives_twenty_four_hours():
    claims = parse_jwt(generate_jwt("user-1"))
    assert claims.expires_at - claims.issued_at == auth.TOKEN_LIFETIME


def test_token_uses_hs256():
    assert jwt.get_unverified_header(generate_jwt("u"))["alg"] == "HS256"


def test_tampered_token_is_rejected():
    signed = generate_jwt("user-1")
    head, body, signature = signed.split(".")
    tampered = ".".join([head, body, signature[::-1]])
    with pytest.raises(InvalidTokenError):
        parse_jwt(tampered)


def test_token_signed_with_other_key_is_rejected():
    foreign = jwt.encode({"user_id": "u"}, "placeholder", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        parse_jwt(foreign)


def test_expired_token_is_rejected():
    past = datetime.now(tz=timezone.utc) - timedelta(hours=1)
    expired = jwt.encode({"user_id": "u", "exp": past}, auth.JWT_SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        parse_jwt(expired)


def test_garbage_is_rejected():
    with pytest.raises(InvalidTokenError):
        parse_jwt("token")


def test_missing_header_is_unauthorized():
    client = _client_for(jwt_required(_me))
    response = client.get("/me")
    assert response.status_code == 401
    assert response.get_json() == {"error": "Authorization header missing or invalid"}


def test_non_bearer_header_is_unauthorized():
    client = _client_for(jwt_required(_me))
    response = client.get("/me", headers={"Authorization": "Basic token"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "Authorization header missing or invalid"}


def test_invalid_bearer_token_is_unauthorized():
    client = _client_for(jwt_required(_me))
    response = client.get("/me", headers={"Authorization": "Bearer token"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid token"}


def test_valid_token_passes_user_id():
    client = _client_for(jwt_required(_me))
    bearer = generate_jwt("alice")
    response = client.get("/me", headers={"Authorization": f"Bearer {bearer}"})
    assert response.status_code == 200
    assert response.get_json() == {"user_id": "alice"}