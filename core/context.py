"""
Application context

Holds the process-wide settings and database handles.  Built once by
``create_app`` and stored on ``app.state.context`` so handlers and
dependencies receive it through the request instead of module globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from config.settings import Settings
from database.session import build_engine, build_session_factory


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]


def build_context(settings: Settings) -> AppContext:
    engine = build_engine(settings.database_url, echo=settings.debug)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
    )


def get_app_context(request: Request) -> AppContext:
    """Dependency — the context attached to the running application."""
    return request.app.state.context
