"""
Tests for bcrypt password hashing.
"""

import bcrypt

from auth.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_salted(self):
        a = hash_password("secret", rounds=4)
        b = hash_password("secret", rounds=4)
        assert a != b
        assert verify_password("secret", a)
        assert verify_password("secret", b)

    def test_never_stores_plaintext(self):
        assert "secret" not in hash_password("secret", rounds=4)

    def test_work_factor_is_encoded_in_hash(self):
        assert hash_password("x", rounds=5).startswith("$2b$05$")
        assert hash_password("x").startswith("$2b$10$")

    def test_wrong_password(self):
        hashed = hash_password("secret", rounds=4)
        assert verify_password("Secret", hashed) is False

    def test_empty_password_is_hashable(self):
        hashed = hash_password("", rounds=4)
        assert verify_password("", hashed)
        assert not verify_password("x", hashed)

    def test_malformed_hash_fails_closed(self):
        assert verify_password("secret", "not-a-bcrypt-hash") is False
        assert verify_password("secret", "") is False

    def test_long_password_uses_first_72_bytes(self):
        pw = "a" * 100
        hashed = hash_password(pw, rounds=4)
        assert verify_password(pw, hashed)
        assert bcrypt.checkpw(b"a" * 72, hashed.encode())
