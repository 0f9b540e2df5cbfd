"""
Unit tests for hubcall.core.security
"""
import time
from datetime import timedelta

import jwt
import pytest

from hubcall.core.exceptions import ExpiredToken, HashingError, InvalidToken, MalformedToken
from hubcall.core.security import PasswordHasher, TokenPurpose, TokenService


class TestPasswordHasher:
    """Tests for PasswordHasher.hash / verify"""

    def test_returns_non_empty_string(self, password_hasher):
        result = password_hasher.hash("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self, password_hasher):
        """Each hash should use a new salt, so hashes differ."""
        h1 = password_hasher.hash("same")
        h2 = password_hasher.hash("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self, password_hasher):
        result = password_hasher.hash("secret123")
        assert result != "secret123"

    def test_default_work_factor_is_ten(self):
        hashed = PasswordHasher().hash("Abcd123!")
        assert hashed.split("$")[2] == "10"

    def test_matching_password_returns_true(self, password_hasher):
        hashed = password_hasher.hash("correct")
        assert password_hasher.verify("correct", hashed) is True

    def test_wrong_password_returns_false(self, password_hasher):
        hashed = password_hasher.hash("correct")
        assert password_hasher.verify("wrong", hashed) is False

    @pytest.mark.parametrize("digest", ["", "plaintext", "$2b$04$tooshort"])
    def test_malformed_digest_raises(self, password_hasher, digest):
        with pytest.raises(HashingError):
            password_hasher.verify("anything", digest)


class TestTokenService:
    """Tests for TokenService.issue / verify"""

    def test_issue_and_verify_roundtrip(self, token_service):
        token = token_service.issue_access_token("user-123", "ann@gmail.com")
        claims = token_service.verify(token)
        assert claims["sub"] == "user-123"
        assert claims["userId"] == "user-123"
        assert claims["email"] == "ann@gmail.com"
        assert claims["purpose"] == TokenPurpose.SESSION
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_reset_token_has_short_window_and_purpose(self, token_service):
        token = token_service.issue_reset_token("user-1")
        claims = token_service.verify(token, purpose=TokenPurpose.PASSWORD_RESET)
        assert claims["purpose"] == TokenPurpose.PASSWORD_RESET
        assert claims["exp"] - claims["iat"] == 3600

    def test_one_hour_token_verified_before_expiry(self, token_service):
        token = token_service.issue("user-9", ttl=timedelta(hours=1))
        assert token_service.verify(token)["sub"] == "user-9"

    def test_one_hour_token_verified_after_expiry(self):
        two_hours_ago = time.time() - 7200
        issuer = TokenService(secret_key="test_jwt_secret", clock=lambda: two_hours_ago)
        verifier = TokenService(secret_key="test_jwt_secret")
        token = issuer.issue("user-9", ttl=timedelta(hours=1))
        with pytest.raises(ExpiredToken):
            verifier.verify(token)

    def test_reset_token_cannot_be_used_as_session(self, token_service):
        token = token_service.issue_reset_token("user-1")
        with pytest.raises(MalformedToken):
            token_service.verify(token, purpose=TokenPurpose.SESSION)

    def test_session_token_cannot_be_used_for_reset(self, token_service):
        token = token_service.issue_access_token("user-1", "ann@gmail.com")
        with pytest.raises(InvalidToken):
            token_service.verify(token, purpose=TokenPurpose.PASSWORD_RESET)

    def test_verify_garbage_raises_malformed(self, token_service):
        with pytest.raises(MalformedToken):
            token_service.verify("invalid.jwt.token")

    def test_verify_tampered_token_raises(self, token_service):
        token = token_service.issue("user-1")
        tampered = token[:-5] + ("xxxxx" if not token.endswith("xxxxx") else "yyyyy")
        with pytest.raises(MalformedToken):
            token_service.verify(tampered)

    def test_verify_other_secret_raises(self, token_service):
        other = TokenService(secret_key="another_secret")
        with pytest.raises(MalformedToken):
            token_service.verify(other.issue("user-1"))

    def test_token_without_subject_is_rejected(self, token_service):
        now = int(time.time())
        token = jwt.encode({"iat": now, "exp": now + 60}, "test_jwt_secret", algorithm="HS256")
        with pytest.raises(MalformedToken):
            token_service.verify(token)

    def test_empty_token_is_rejected(self, token_service):
        with pytest.raises(MalformedToken):
            token_service.verify("")
