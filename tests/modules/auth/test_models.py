import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from modules.auth.models import (
    LoginRequest,
    SignupRequest,
    TokenClaims,
    UserRecord,
)


class TestSignupRequest:
    def test_valid(self):
        request = SignupRequest(email="a@x.com", password="password123")
        assert request.email == "a@x.com"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="not-an-email", password="password123")

    def test_short_password(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="a@x.com", password="short")

    def test_missing_fields(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="a@x.com")


class TestLoginRequest:
    def test_any_non_empty_password(self):
        """Login does not apply the signup length policy."""
        request = LoginRequest(email="a@x.com", password="x")
        assert request.password == "x"

    def test_empty_password(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="a@x.com", password="")


class TestUserRecord:
    def test_to_public_drops_hash(self):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        user = UserRecord(
            id="user-123",
            email="a@x.com",
            password_hash="$2b$04$hash",
            created_at=now,
            updated_at=now,
        )

        public = user.to_public().model_dump()
        assert public["id"] == "user-123"
        assert "password_hash" not in public


class TestTokenClaims:
    def test_datetime_properties(self):
        claims = TokenClaims(sub="user-123", email="a@x.com", iat=1767268800, exp=1767355200)
        assert claims.issued_at == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert claims.expires_at == datetime(2026, 1, 2, 12, 0, tzinfo=timezone.utc)
