"""Web application factory and entry point for the profile API."""

from __future__ import annotations

import logging
import secrets
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from career_canvas.config import load_settings
from career_canvas.database.client import CosmosClient
from career_canvas.logging import configure_logging
from career_canvas.routes import profile

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from career_canvas.config import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: Settings) -> CosmosClient:
    """Create and initialize the Cosmos DB client."""
    cosmos = CosmosClient(settings.cosmos)
    await cosmos.initialize()
    return cosmos


def create_app() -> FastAPI:
    """Build the FastAPI application with session auth and the profile API."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        cosmos = await init_database(settings)
        app.state.cosmos = cosmos
        app.state.settings = settings
        logger.info("Profile API started — env=%s", settings.app.env)
        try:
            yield
        finally:
            await cosmos.close()
            logger.info("Profile API stopped")

    app = FastAPI(title="Career Canvas", lifespan=lifespan)

    secret_key = settings.app.secret_key
    if not secret_key:
        if not settings.app.is_development:
            msg = "APP_SECRET_KEY must be set outside development"
            raise RuntimeError(msg)
        logger.warning("APP_SECRET_KEY is not set — using an ephemeral session key")
        secret_key = secrets.token_urlsafe(32)
    app.add_middleware(SessionMiddleware, secret_key=secret_key)

    app.include_router(profile.router)
    return app


def main() -> None:
    """Run the profile API with uvicorn."""
    settings = load_settings()
    uvicorn.run(
        "career_canvas.app:create_app",
        factory=True,
        host=settings.app.host,
        port=settings.app.port,
    )


if __name__ == "__main__":
    main()
