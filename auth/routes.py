"""
Auth API routes — signup, login.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from auth.jwt import create_token
from auth.password import hash_password, verify_password
from core.context import AppContext, get_app_context
from database.helpers import create_user, get_user_by_email
from utils.schemas import LoginRequest, MessageResponse, SignupRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

_DUPLICATE_USER = "User already exists"
# One message for unknown email and wrong password, so accounts can't be enumerated.
_BAD_CREDENTIALS = "Invalid email or password"
_SERVER_ERROR = "Internal server error"


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return hash_password("dummy-password-for-timing", rounds)


@router.post("/signup", response_model=MessageResponse)
async def signup(
    req: SignupRequest,
    session: AsyncSession = Depends(db_session),
    ctx: AppContext = Depends(get_app_context),
) -> Dict[str, Any]:
    """Create an account.  No token is issued; the client logs in next."""
    try:
        if await get_user_by_email(session, req.email) is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=_DUPLICATE_USER,
            )

        password_hash = await run_in_threadpool(
            hash_password, req.password, ctx.settings.bcrypt_rounds
        )
        user = await create_user(session, req.name, req.email, password_hash)
        await session.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email.
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_DUPLICATE_USER,
        )
    except SQLAlchemyError:
        logger.exception("Signup failed for %s", req.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_SERVER_ERROR,
        )

    logger.info("Registered user %s (%s)", req.name, user.user_id)
    return {"message": "User created successfully"}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
    ctx: AppContext = Depends(get_app_context),
) -> Dict[str, Any]:
    """Login with email + password."""
    try:
        user = await get_user_by_email(session, req.email)
    except SQLAlchemyError:
        logger.exception("Login lookup failed for %s", req.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_SERVER_ERROR,
        )

    # Unknown emails still pay for a bcrypt check so timing matches a wrong password.
    if user is not None:
        stored_hash = user.password_hash
    else:
        stored_hash = _dummy_hash(ctx.settings.bcrypt_rounds)
    password_ok = await run_in_threadpool(verify_password, req.password, stored_hash)
    if user is None or not password_ok:
        logger.info("Failed login for %s", req.email)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_BAD_CREDENTIALS,
        )

    token = create_token(
        str(user.user_id),
        ctx.settings.jwt_secret,
        ctx.settings.jwt_expiry_seconds,
    )
    logger.info("Login: %s (%s)", user.name, user.user_id)
    return {"token": token}
