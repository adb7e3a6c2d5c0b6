"""Tests for JWT token management."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from imara.auth.jwt import create_access_token, verify_token
from imara.config import get_settings


class TestAccessToken:
    def test_create_and_verify(self):
        token = create_access_token(user_id="u123", email="ada@example.com")
        payload = verify_token(token, expected_type="access")
        assert payload["sub"] == "u123"
        assert payload["email"] == "ada@example.com"
        assert payload["type"] == "access"

    def test_valid_for_thirty_days(self):
        token = create_access_token(user_id="u123", email="ada@example.com")
        payload = verify_token(token)
        assert payload["exp"] - payload["iat"] == 30 * 24 * 3600

    def test_wrong_type_rejected(self):
        token = create_access_token(user_id="u123", email="ada@example.com")
        with pytest.raises(jwt.InvalidTokenError, match="Expected token type"):
            verify_token(token, expected_type="refresh")

    def test_expired_token_rejected(self):
        settings = get_settings()
        past = datetime.now(timezone.utc) - timedelta(days=31)
        token = jwt.encode(
            {
                "sub": "u123",
                "iat": past,
                "exp": past + timedelta(days=1),
                "iss": settings.jwt_issuer,
                "type": "access",
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(jwt.InvalidTokenError, match="expired"):
            verify_token(token)

    def test_foreign_secret_rejected(self):
        token = jwt.encode({"sub": "u123", "type": "access"}, "some-other-secret", algorithm="HS256")
        with pytest.raises(jwt.InvalidTokenError):
            verify_token(token)
