"""
Database helper functions — user lookup and owner-scoped task access.

Every task helper takes the owner's id and filters on it, so a task that
belongs to someone else behaves exactly like one that does not exist.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Task, User


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


def parse_task_id(value: str) -> Optional[uuid.UUID]:
    """Return the UUID for a path id, or ``None`` if it cannot be one."""
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError):
        return None


# ── Users ───────────────────────────────────────────────────────────


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
) -> User:
    """Insert a user row.  The unique index on ``email`` rejects duplicates."""
    user = User(
        user_id=uuid.uuid4(),
        name=name,
        email=email,
        password_hash=password_hash,
    )
    session.add(user)
    await session.flush()
    return user


# ── Tasks ───────────────────────────────────────────────────────────


async def create_task(session: AsyncSession, owner_id: str, title: str) -> Task:
    task = Task(
        task_id=uuid.uuid4(),
        title=title,
        completed=False,
        owner_id=_to_uuid(owner_id),
    )
    session.add(task)
    await session.flush()
    return task


async def list_tasks(session: AsyncSession, owner_id: str) -> List[Task]:
    result = await session.execute(
        select(Task)
        .where(Task.owner_id == _to_uuid(owner_id))
        .order_by(Task.created_at.asc())
    )
    return list(result.scalars().all())


async def get_owned_task(
    session: AsyncSession,
    owner_id: str,
    task_id: uuid.UUID,
) -> Optional[Task]:
    result = await session.execute(
        select(Task).where(
            Task.task_id == task_id,
            Task.owner_id == _to_uuid(owner_id),
        )
    )
    return result.scalar_one_or_none()


async def update_task(
    session: AsyncSession,
    owner_id: str,
    task_id: uuid.UUID,
    changes: Dict[str, Any],
) -> Optional[Task]:
    """
    Apply ``changes`` to the caller's task and return it.

    Only keys present in ``changes`` are written; anything else on the row
    is left untouched.  Returns ``None`` when no owned task matches.
    """
    task = await get_owned_task(session, owner_id, task_id)
    if task is None:
        return None
    for field, value in changes.items():
        setattr(task, field, value)
    await session.flush()
    await session.refresh(task)
    return task


async def delete_task(
    session: AsyncSession,
    owner_id: str,
    task_id: uuid.UUID,
) -> bool:
    """Delete the caller's task.  Returns ``False`` if nothing matched."""
    task = await get_owned_task(session, owner_id, task_id)
    if task is None:
        return False
    await session.delete(task)
    await session.flush()
    return True
