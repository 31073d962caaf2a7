"""FastAPI application entry point.

ISUPipe API - livestream tags, reactions, themes and statistics.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from isupipe.routes import api_router
from isupipe.schemas import ErrorDetail, ErrorResponse
from isupipe.services.errors import ServiceError
from isupipe.services.tag_cache import TagCache
from isupipe.settings import get_settings
from isupipe.stores.postgres import init_db, close_db, ping_db
from isupipe.stores.redis import init_redis, close_redis

logger = logging.getLogger("uvicorn.error")


def _error_response(status_code: int, code: str, message: str, detail: dict | None = None) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, detail=detail))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    try:
        await init_db()
        await ping_db()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres init failed")

    try:
        await init_redis()
    except Exception:
        logger.exception("Redis init failed")

    # Tags are read once here; POST /api/initialize reloads them.
    try:
        await app.state.tag_cache.initialize()
    except Exception:
        logger.critical(
            "Tag cache init failed; tag lookups are empty until POST /api/initialize",
            exc_info=True,
        )

    yield

    # Shutdown
    await close_redis()
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Livestream tags, reactions, themes and statistics API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Process-wide tag cache, handed to routes via routes.deps.get_tag_cache
    app.state.tag_cache = TagCache()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        """Domain errors carry their own status and code."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
        message = exc.message if exc.status_code < 500 or settings.debug else "Internal server error"
        return _error_response(exc.status_code, exc.code, message, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed path/query/body values are a 400, as the public API has always answered."""
        return _error_response(
            400,
            "BAD_REQUEST",
            "invalid request parameters",
            {"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        return _error_response(
            500,
            "INTERNAL_ERROR",
            str(exc) if settings.debug else "Internal server error",
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "isupipe.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
