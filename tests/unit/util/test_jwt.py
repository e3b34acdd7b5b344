"""Tests for session token helpers."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from stackit.config import AuthSettings
from stackit.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


def test_round_trip_keeps_subject_and_handle():
    token = create_token("user-1", "alice", SETTINGS)

    payload = verify_token(token, SETTINGS)

    assert payload.user_id == "user-1"
    assert payload.handle == "alice"


def test_wrong_secret_is_rejected():
    token = create_token("user-1", "alice", AuthSettings(jwt_secret="other"))

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, SETTINGS)


def test_expired_token_is_rejected():
    issued_at = datetime.now(UTC) - timedelta(days=2)
    token = jwt.encode(
        {"sub": "user-1", "iat": issued_at, "exp": issued_at + timedelta(days=1)},
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(token, SETTINGS)


def test_token_without_subject_is_rejected():
    issued_at = datetime.now(UTC)
    token = jwt.encode(
        {"user_id": "user-1", "iat": issued_at, "exp": issued_at + timedelta(hours=1)},
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="sub"):
        verify_token(token, SETTINGS)
