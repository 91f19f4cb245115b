from datetime import UTC, datetime, timedelta

from jose import jwt

from src.api.utils.jwt import generate_jwt, verify_jwt
from src.app.settings import AuthSettings


def test_generated_token_round_trips_claims(settings):
    token = generate_jwt({"id": "42", "email": "a@b.c", "admin": False}, settings)

    payload = verify_jwt(token, settings)

    assert payload["id"] == "42"
    assert payload["email"] == "a@b.c"
    assert payload["admin"] is False
    assert payload["exp"] - payload["iat"] == settings.access_token_expire_minutes * 60


def test_token_signed_with_other_secret_is_rejected(settings):
    other = AuthSettings(jwt_secret="another-secret")
    token = generate_jwt({"id": "42"}, other)

    assert verify_jwt(token, settings) is None


def test_expired_token_is_rejected(settings):
    past = datetime.now(UTC) - timedelta(hours=2)
    token = jwt.encode(
        {"id": "42", "iat": past, "exp": past + timedelta(minutes=5)},
        settings.jwt_secret,
        algorithm="HS256",
    )

    assert verify_jwt(token, settings) is None


def test_garbage_is_rejected(settings):
    assert verify_jwt("not-a-jwt", settings) is None
