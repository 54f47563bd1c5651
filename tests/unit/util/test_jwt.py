"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from colloquy.config import AuthSettings
from colloquy.util.jwt import JWTError, create_token, verify_token


class TestJWT:
    """Tests for create_token and verify_token."""

    def test_round_trip_keeps_role(self):
        settings = AuthSettings(jwt_secret="test-secret")

        token = create_token("user-1", "admin", settings)
        payload = verify_token(token, settings)

        assert payload.user_id == "user-1"
        assert payload.role == "admin"

    def test_wrong_secret(self):
        token = create_token("user-1", "user", AuthSettings(jwt_secret="one"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="two"))

    def test_expired_token(self):
        settings = AuthSettings(jwt_secret="test-secret")
        token = jwt.encode(
            {
                "user_id": "user-1",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)

    def test_role_defaults_to_user(self):
        settings = AuthSettings(jwt_secret="test-secret")
        token = jwt.encode(
            {
                "user_id": "user-1",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        assert verify_token(token, settings).role == "user"

    def test_missing_user_id_is_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret")
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, settings)

    def test_lifetime_override(self):
        settings = AuthSettings(jwt_secret="test-secret", jwt_leeway_seconds=0)

        token = create_token("user-1", "user", settings, timedelta(seconds=-1))

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)
