# ABOUTME: FastAPI application factory with database lifespan.
# ABOUTME: Main entry point for the gig guide admin API.

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from gig_guide.db.session import close_db, init_db
from gig_guide.web.routes import api, content, subscribers, translation

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context for database setup/teardown."""
    logger.info("app_startup")
    await init_db()
    yield
    logger.info("app_shutdown")
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Melbourne Gig Guide",
        description="Subscriber management and multilingual gig guide generation",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(api.router)
    app.include_router(subscribers.router)
    app.include_router(content.router)
    app.include_router(translation.router)

    return app


# Application instance for uvicorn
app = create_app()
