"""
Unit tests for core.security module.
Tests password hashing and bearer token issuing/verification.
"""
import datetime as dt

import jwt
import pytest

from phatfit.core.errors import AuthError
from phatfit.core.security import (
    JWT_ALG,
    TokenService,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "pw123"
        assert hash_password(password) != hash_password(password)

    def test_hash_password_does_not_contain_plain_text(self):
        hashed = hash_password("pw123")
        assert isinstance(hashed, str)
        assert "pw123" not in hashed
        assert hashed.startswith("$argon2")

    def test_verify_password_correct_password(self):
        hashed = hash_password("pw123")
        assert verify_password("pw123", hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("pw123")
        assert verify_password("wrongpw", hashed) is False

    def test_verify_password_unrecognised_hash(self):
        """A corrupt stored hash behaves like a wrong password instead of raising."""
        assert verify_password("pw123", "not-a-hash") is False


class TestTokenService:
    """Tests for token issuing and verification."""

    def test_issue_and_verify_round_trip(self):
        tokens = TokenService("secret-a")
        token = tokens.issue("user-123")
        assert isinstance(token, str)
        assert tokens.verify(token) == "user-123"

    def test_tokens_do_not_expire_by_default(self):
        token = TokenService("secret-a").issue("user-123")
        payload = jwt.decode(token, "secret-a", algorithms=[JWT_ALG])
        assert payload["sub"] == "user-123"
        assert "iat" in payload
        assert "exp" not in payload

    def test_expiry_is_written_when_configured(self):
        token = TokenService("secret-a", expire_minutes=30).issue("user-123")
        payload = jwt.decode(token, "secret-a", algorithms=[JWT_ALG])
        assert abs((payload["exp"] - payload["iat"]) / 60 - 30) < 1

    def test_expired_token_is_rejected(self):
        past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=2)
        token = jwt.encode(
            {"sub": "user-123", "iat": past, "exp": past + dt.timedelta(minutes=5)},
            "secret-a",
            algorithm=JWT_ALG,
        )
        with pytest.raises(AuthError):
            TokenService("secret-a").verify(token)

    def test_wrong_secret_is_rejected(self):
        token = TokenService("secret-a").issue("user-123")
        with pytest.raises(AuthError):
            TokenService("secret-b").verify(token)

    @pytest.mark.parametrize("garbage", ["", "garbage", "invalid.token.here", "a.b"])
    def test_malformed_token_is_rejected(self, garbage):
        with pytest.raises(AuthError):
            TokenService("secret-a").verify(garbage)

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode({"foo": "bar"}, "secret-a", algorithm=JWT_ALG)
        with pytest.raises(AuthError):
            TokenService("secret-a").verify(token)

    def test_different_users_get_different_subjects(self):
        tokens = TokenService("secret-a")
        assert tokens.verify(tokens.issue("user-1")) == "user-1"
        assert tokens.verify(tokens.issue("user-2")) == "user-2"

    def test_empty_secret_is_refused(self):
        with pytest.raises(ValueError):
            TokenService("")
