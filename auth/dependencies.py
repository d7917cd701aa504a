"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user_id`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import verify_token
from core.context import AppContext, get_app_context
from database.session import get_db_session

_BEARER_PREFIX = "Bearer "


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    ctx: AppContext = Depends(get_app_context),
) -> str:
    """
    Verify the token from the ``Authorization`` header, returning the
    authenticated ``user_id`` (UUID string).

    The header carries the raw token; a ``Bearer `` prefix is accepted too.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
        )
    token = authorization.strip()
    if token.startswith(_BEARER_PREFIX):
        token = token[len(_BEARER_PREFIX):].strip()
    return verify_token(token, ctx.settings.jwt_secret)
