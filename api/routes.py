"""
REST API routes — liveness and the caller's tasks.

Every task route depends on ``get_current_user_id`` before the DB session,
so an unauthenticated request is rejected without opening one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from database.helpers import (
    create_task,
    delete_task,
    list_tasks,
    parse_task_id,
    update_task,
)
from database.models import Task
from utils.schemas import MessageResponse, TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

_TITLE_REQUIRED = "Title required"
_NOT_FOUND = "Task not found"
_SERVER_ERROR = "Internal server error"


def _task_to_dict(task: Task) -> Dict[str, Any]:
    return {
        "id": str(task.task_id),
        "title": task.title,
        "completed": task.completed,
        "owner_id": str(task.owner_id),
        "created_at": task.created_at,
        "updated_at": task.updated_at,
    }


def _server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=_SERVER_ERROR,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)


@router.get("/", response_class=PlainTextResponse, tags=["health"])
async def liveness() -> str:
    return "Task API is running"


@router.post(
    "/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["tasks"],
)
async def create_task_route(
    req: TaskCreate,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    if not req.title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_TITLE_REQUIRED)
    try:
        task = await create_task(session, user_id, req.title)
        await session.commit()
    except SQLAlchemyError:
        logger.exception("Create task failed for user %s", user_id)
        raise _server_error()

    logger.info("Task %s created by %s", task.task_id, user_id)
    return _task_to_dict(task)


@router.get("/tasks", response_model=List[TaskResponse], tags=["tasks"])
async def list_tasks_route(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> List[Dict[str, Any]]:
    try:
        tasks = await list_tasks(session, user_id)
    except SQLAlchemyError:
        logger.exception("List tasks failed for user %s", user_id)
        raise _server_error()
    return [_task_to_dict(t) for t in tasks]


@router.put("/tasks/{task_id}", response_model=TaskResponse, tags=["tasks"])
async def update_task_route(
    task_id: str,
    req: Optional[TaskUpdate] = None,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Apply only the fields present in the body; others keep their values."""
    changes = req.changes() if req is not None else {}
    if "title" in changes and not changes["title"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_TITLE_REQUIRED)

    tid = parse_task_id(task_id)
    if tid is None:
        raise _not_found()

    try:
        task = await update_task(session, user_id, tid, changes)
        if task is not None:
            await session.commit()
    except SQLAlchemyError:
        logger.exception("Update task %s failed for user %s", task_id, user_id)
        raise _server_error()

    if task is None:
        raise _not_found()
    logger.info("Task %s updated by %s (%s)", task_id, user_id, sorted(changes))
    return _task_to_dict(task)


@router.delete("/tasks/{task_id}", response_model=MessageResponse, tags=["tasks"])
async def delete_task_route(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    tid = parse_task_id(task_id)
    if tid is None:
        raise _not_found()

    try:
        deleted = await delete_task(session, user_id, tid)
        if deleted:
            await session.commit()
    except SQLAlchemyError:
        logger.exception("Delete task %s failed for user %s", task_id, user_id)
        raise _server_error()

    if not deleted:
        raise _not_found()
    logger.info("Task %s deleted by %s", task_id, user_id)
    return {"message": "Task deleted"}
