"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, diaspora_assist.api, diaspora_assist.observability, diaspora_assist.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diaspora_assist.api import api_router
from diaspora_assist.api.deps import get_service_cache
from diaspora_assist.api.routers import health_router
from diaspora_assist.configs import get_settings
from diaspora_assist.observability.logger import configure_logging
from diaspora_assist.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    Builds every client once and starts the keep-alive pinger.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        # Initialize expensive resources once at startup
        cache.assistant_service
        logger.info("Application startup complete: all resources initialized")
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    keep_alive = cache.keep_alive_service
    keep_alive.start()
    app.state.keep_alive = keep_alive

    yield

    # Shutdown
    await keep_alive.stop()
    logger.info("Application shutdown")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report unexpected errors as a generic 500."""
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Diaspora Assist API",
        description="Multilingual immigration assistance with retrieval-augmented answers",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added last = outermost); the correlation ID
    # must be bound before the request line is logged
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routes
    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "diaspora_assist.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
