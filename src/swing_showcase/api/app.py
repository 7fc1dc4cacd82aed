"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swing_showcase.api.admin import router as admin_router
from swing_showcase.api.auth import router as auth_router
from swing_showcase.api.competitions import router as competitions_router
from swing_showcase.api.errors import install_error_handlers
from swing_showcase.api.notifications import router as notifications_router
from swing_showcase.api.prizes import router as prizes_router
from swing_showcase.api.public import router as public_router
from swing_showcase.api.support import router as support_router
from swing_showcase.api.users import router as users_router
from swing_showcase.api.votes import router as votes_router
from swing_showcase.app_logging import configure_logging
from swing_showcase.config import parse_cors_origins
from swing_showcase.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Swing Boudoir API starting: environment=%s storage=%s",
            container.settings.environment,
            container.settings.storage_backend,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(competitions_router)
    app.include_router(votes_router)
    app.include_router(notifications_router)
    app.include_router(prizes_router)
    app.include_router(public_router)
    app.include_router(support_router)
    app.include_router(admin_router)

    @app.get("/api/health")
    async def health() -> dict[str, object]:
        """Simple health check endpoint."""
        return {
            "success": True,
            "message": "Swing Boudoir API is running",
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }

    return app
