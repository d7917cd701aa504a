"""
Task List API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from api.middleware import register_middleware
from api.routes import router as api_router
from auth.routes import router as auth_router
from config.settings import Settings, get_settings
from core.context import build_context
from database.session import init_db

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "asyncio", "aiosqlite"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.debug)
    context = build_context(settings)

    app = FastAPI(
        title="Task List API",
        version="1.0.0",
        description="Multi-user to-do list with token authentication.",
    )
    app.state.context = context

    register_middleware(app, settings.cors_origins)

    # Routes
    app.include_router(auth_router)
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup():
        logger.info("Connecting to database…")
        try:
            await init_db(context.engine)
        except Exception:
            logger.critical("Database unavailable; refusing to start", exc_info=True)
            raise
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await context.engine.dispose()
        logger.info("Database connections closed.")

    return app


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging(debug=False)
        logger.critical("Invalid configuration, refusing to start:\n%s", exc)
        sys.exit(1)

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
