"""Main FastAPI application entry point."""

import asyncio
import contextlib
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import get_engine, get_persistence_service
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from infrastructure.database.session import init_schema

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the entity store on startup, snapshot it periodically and on shutdown."""
    engine = get_engine()
    persistence = get_persistence_service()

    await init_schema(engine)
    await persistence.load()

    async def snapshot_loop() -> None:
        """Bound the loss on a crash to one interval of mutations."""
        while True:
            await asyncio.sleep(settings.snapshot_interval_seconds)
            await persistence.save()

    snapshot_task = asyncio.create_task(snapshot_loop())
    try:
        yield
    finally:
        snapshot_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await snapshot_task

        logger.info("shutdown_snapshot_started")
        await persistence.save()
        await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        title=settings.app_name,
        description=(
            "## Hackathon Teammate Matchmaking\n\n"
            "Participants register their skills, get ranked teammate suggestions "
            "and form teams of up to five members.\n\n"
            "### Features\n"
            "- **Matches**: candidates ranked by the skills they add, with a bonus "
            "for verified participants\n"
            "- **Teams**: create, join and leave; team skills and verified-member "
            "counts stay in sync with the members\n"
            "- **Verification**: optional screenshot-based registration check\n\n"
            "### Identity\n"
            "The chat transport identifies the acting user in the `X-Actor-Id` "
            "header on every `/api/v1` call.\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- POST/PUT/DELETE: 10 requests/minute"
        ),
        version="1.0.0",
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profiles",
                "description": "Registration and skill selection",
            },
            {
                "name": "matches",
                "description": "Complementary teammate suggestions",
            },
            {
                "name": "teams",
                "description": "Team creation, membership and export",
            },
            {
                "name": "verification",
                "description": "Optional registration verification",
            },
            {
                "name": "notifications",
                "description": "Team events queued for the chat transport",
            },
        ],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
