"""
Pydantic schemas for the task list API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════════
# Accounts
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseModel):
    # Bounds match the users table columns.
    name: str = Field(..., min_length=1, max_length=128)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


# ═══════════════════════════════════════════════════════════════════════════════
# Tasks
# ═══════════════════════════════════════════════════════════════════════════════


class TaskCreate(BaseModel):
    # Presence is checked in the handler so a missing title gets "Title required".
    title: Optional[str] = None


class TaskUpdate(BaseModel):
    """
    Partial update.  Only fields the client actually sent (and did not send
    as ``null``) are applied; see ``changes``.
    """

    title: Optional[str] = None
    completed: Optional[bool] = None

    def changes(self) -> dict:
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None
        }


class TaskResponse(BaseModel):
    id: str
    title: str
    completed: bool
    owner_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
