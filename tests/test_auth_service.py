"""
Tests for workforce/services/auth_service.py
"""
from unittest.mock import patch

import pytest

from workforce.models import UserRole
from workforce.services import auth_service
from workforce.utils.errors import AuthenticationError, ConflictError, ValidationError
from workforce.utils.security import create_access_token


class TestRegister:
    def test_registers_employee_by_default(self, db, settings):
        result = auth_service.register(db, settings, "new@company.com", "Password123")

        assert result["user"]["email"] == "new@company.com"
        assert result["user"]["role"] == "employee"
        assert "password_hash" not in result["user"]
        assert result["token"]

    def test_normalizes_email(self, db, settings):
        result = auth_service.register(db, settings, "  Mixed.Case@Company.COM ", "Password123")
        assert result["user"]["email"] == "mixed.case@company.com"

    def test_registers_admin_when_requested(self, db, settings):
        result = auth_service.register(db, settings, "boss@company.com", "Password123", role=UserRole.ADMIN)
        assert result["user"]["role"] == "admin"

    def test_rejects_empty_email(self, db, settings):
        with pytest.raises(ValidationError, match="Email is required"):
            auth_service.register(db, settings, "   ", "Password123")

    def test_rejects_short_password(self, db, settings):
        with pytest.raises(ValidationError, match="at least 8 characters"):
            auth_service.register(db, settings, "short@company.com", "1234567")

    def test_rejects_duplicate_email_case_insensitively(self, db, settings):
        auth_service.register(db, settings, "dup@company.com", "Password123")
        with pytest.raises(ConflictError, match="Email already registered"):
            auth_service.register(db, settings, "DUP@Company.com", "Password123")

    def test_concurrent_duplicate_is_a_conflict(self, db, settings):
        auth_service.register(db, settings, "race@company.com", "Password123")
        # Both requests pass the existence check before either inserts
        with patch("workforce.queries.user_queries.user_exists_by_email", return_value=False):
            with pytest.raises(ConflictError, match="Email already registered"):
                auth_service.register(db, settings, "race@company.com", "Password123")

        result = auth_service.login(db, settings, "race@company.com", "Password123")
        assert result["user"]["email"] == "race@company.com"

    def test_stores_hash_not_password(self, db, settings):
        from workforce.queries import user_queries

        auth_service.register(db, settings, "hash@company.com", "Password123")
        user = user_queries.get_user_by_email(db, "hash@company.com")
        assert user.password_hash != "Password123"
        assert user.password_hash.startswith("$2")


class TestLogin:
    def test_login_success(self, db, settings):
        auth_service.register(db, settings, "login@company.com", "Password123")
        result = auth_service.login(db, settings, "LOGIN@company.com ", "Password123")
        assert result["user"]["email"] == "login@company.com"
        assert result["token"]

    def test_unknown_email_and_wrong_password_are_indistinguishable(self, db, settings):
        auth_service.register(db, settings, "known@company.com", "Password123")

        with pytest.raises(AuthenticationError) as unknown:
            auth_service.login(db, settings, "nobody@company.com", "Password123")
        with pytest.raises(AuthenticationError) as wrong:
            auth_service.login(db, settings, "known@company.com", "WrongPassword")

        assert unknown.value.message == wrong.value.message == "Invalid email or password"

    def test_rejects_missing_fields(self, db, settings):
        with pytest.raises(ValidationError, match="Email is required"):
            auth_service.login(db, settings, "", "Password123")
        with pytest.raises(ValidationError, match="Password is required"):
            auth_service.login(db, settings, "a@company.com", "")


class TestTokens:
    def test_token_carries_identity_claims(self, db, settings):
        result = auth_service.register(db, settings, "claims@company.com", "Password123")
        payload = auth_service.decode_token(settings, result["token"])

        assert payload["userId"] == result["user"]["id"]
        assert payload["email"] == "claims@company.com"
        assert payload["role"] == "employee"
        assert "exp" in payload

    def test_rejects_token_signed_with_other_secret(self, settings):
        token = create_access_token({"userId": 1, "email": "x@company.com", "role": "admin"}, "other-secret")
        with pytest.raises(AuthenticationError, match="Invalid or expired token"):
            auth_service.decode_token(settings, token)

    def test_rejects_expired_token(self, settings):
        token = create_access_token(
            {"userId": 1, "email": "x@company.com", "role": "admin"},
            settings.jwt_secret,
            expires_minutes=-1,
        )
        with pytest.raises(AuthenticationError):
            auth_service.decode_token(settings, token)

    def test_rejects_token_without_identity(self, settings):
        token = create_access_token({"sub": "x@company.com"}, settings.jwt_secret)
        with pytest.raises(AuthenticationError):
            auth_service.decode_token(settings, token)

    def test_rejects_garbage(self, settings):
        with pytest.raises(AuthenticationError):
            auth_service.decode_token(settings, "not-a-jwt")
