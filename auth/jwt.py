"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
The secret and lifetime come from ``Settings`` (env vars: ``JWT_SECRET``,
``JWT_EXPIRY_SECONDS``) and are passed in by the caller.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from base64 import b64decode, b64encode

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

INVALID_TOKEN = "Invalid token"


def _sign(raw: bytes, secret: str) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: str, secret: str, expiry_seconds: int) -> str:
    """Create a signed token containing ``user_id``, issue time and expiry."""
    now = int(time.time())
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + expiry_seconds,
    }
    raw = json.dumps(payload).encode()
    return b64encode(raw).decode() + "." + _sign(raw, secret)


def verify_token(token: str, secret: str) -> str:
    """
    Verify token and return ``user_id``.

    Raises ``HTTPException(401)`` on any failure.  Malformed, tampered and
    expired tokens all produce the same response; the reason is only logged.
    """
    try:
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise ValueError("bad format")
        raw = b64decode(parts[0], validate=True)
        if not hmac.compare_digest(parts[1], _sign(raw, secret)):
            raise ValueError("bad signature")
        payload = json.loads(raw)
        exp = payload["exp"]
        if not isinstance(exp, (int, float)) or exp < time.time():
            raise ValueError("token expired")
        user_id = payload["user_id"]
        if not isinstance(user_id, str) or not user_id:
            raise ValueError("bad subject")
        return user_id
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        logger.debug("Token rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_TOKEN,
        )
