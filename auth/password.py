"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 10
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    # bcrypt only ever reads the first 72 bytes; newer releases reject longer input.
    return password.encode()[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted, ``rounds`` work factor)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError, AttributeError):
        return False
