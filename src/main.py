"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.routes.todos import router as todos_router
from core.config import APP_VERSION, settings
from core.logging import setup_logging
from infrastructure.store.redis_client import check_connection, create_redis_client

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared store connection; refuse to start if it is unreachable."""
    client = create_redis_client(settings.redis_url)
    try:
        await check_connection(client)
    except Exception:
        logger.error("store_connection_failed", exc_info=True)
        await client.aclose()
        raise

    logger.info("store_connected", key=settings.todos_key)
    app.state.redis = client
    try:
        yield
    finally:
        await client.aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## To-do list\n\n"
            "List, create, toggle and delete short text tasks. The whole list "
            "is stored as one JSON document in Redis."
        ),
        version=APP_VERSION,
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "todos",
                "description": "Todo operations",
            },
        ],
    )

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(todos_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.debug("listening", host=settings.host, port=settings.port)
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
