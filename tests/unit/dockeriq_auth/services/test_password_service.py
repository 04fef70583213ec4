"""Unit tests for PasswordHashingService."""

import pytest

from dockeriq_auth.exceptions import WeakPasswordError
from dockeriq_auth.services import PasswordHashingService


class TestPasswordHashing:
    """Tests for hashing and verification."""

    def setup_method(self):
        # Low work factor keeps the tests fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_is_bcrypt(self):
        hashed = self.service.hash("my_secure_password")

        assert hashed != "my_secure_password"
        assert PasswordHashingService.is_hashed(hashed)

    def test_hash_is_salted(self):
        assert self.service.hash("my_secure_password") != self.service.hash(
            "my_secure_password",
        )

    def test_verify_correct_password(self):
        hashed = self.service.hash("my_secure_password")
        assert self.service.verify("my_secure_password", hashed)

    def test_verify_wrong_password(self):
        hashed = self.service.hash("my_secure_password")
        assert not self.service.verify("wrong_password", hashed)

    def test_verify_against_plaintext_returns_false(self):
        assert not self.service.verify("my_secure_password", "my_secure_password")


class TestIsHashed:
    @pytest.mark.parametrize(
        "value",
        [
            "$2a$10$abcdefghijklmnopqrstuu",
            "$2b$12$abcdefghijklmnopqrstuu",
            "$2y$12$abcdefghijklmnopqrstuu",
        ],
    )
    def test_bcrypt_prefixes(self, value):
        assert PasswordHashingService.is_hashed(value)

    @pytest.mark.parametrize("value", ["", None, "plain-password", "$1$md5"])
    def test_not_hashed(self, value):
        assert not PasswordHashingService.is_hashed(value)


class TestPasswordStrength:
    """Tests for password strength validation."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_empty_password(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.hash("")

    def test_short_password(self):
        with pytest.raises(WeakPasswordError, match="at least 8"):
            self.service.hash("short")

    def test_password_longer_than_bcrypt_limit(self):
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.hash("x" * 73)
