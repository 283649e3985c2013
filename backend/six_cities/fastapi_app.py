"""
FastAPI Application Factory.
Creates and configures the FastAPI application with middleware, DI and the
guarded routes of every controller.

Run with uvicorn in factory mode:
    uvicorn six_cities.fastapi_app:create_fastapi_app --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from six_cities import __version__
from six_cities.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from six_cities.config.settings import Config
from six_cities.presentation.api import OfferController, UserController
from six_cities.presentation.pipeline import PipelineExecutor, mount_routes
from six_cities.presentation.pipeline.results import internal_error_payload
from six_cities.setup.ioc.container import (
    InMemoryStorageProvider,
    StorageProvider,
    build_container,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER, NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _storage_provider_for(config: type[Config]) -> StorageProvider:
    if config.STORAGE_BACKEND == "memory":
        return InMemoryStorageProvider()
    if config.STORAGE_BACKEND == "prisma":
        # Needs a generated Prisma client
        from six_cities.setup.ioc.prisma_provider import PrismaStorageProvider

        return PrismaStorageProvider()
    raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND!r}")


def create_fastapi_app(
    config: type[Config] = Config,
    storage_provider: Optional[StorageProvider] = None,
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        config: Settings class; tests pass a subclass
        storage_provider: Repository provider; chosen from
            ``config.STORAGE_BACKEND`` when omitted

    Returns:
        FastAPI application instance
    """
    setup_logging(config.LOG_LEVEL, config.LOG_PATH, config.LOG_FORMAT)

    storage = storage_provider or _storage_provider_for(config)
    container = build_container(config, storage)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await storage.startup(container)
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await storage.shutdown(container)
        container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title=config.APP_TITLE,
        description="Six Cities rental marketplace API",
        version=__version__,
        debug=config.DEBUG,
        lifespan=lifespan,
    )
    app.state.container = container

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Guarded routes take no FastAPI parameters, so this only fires for
    # the plain routes below
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.info(f"Request validation failed: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": exc.errors()},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"HTTP {exc.status_code} on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled {type(exc).__name__}: {exc}")
        return JSONResponse(status_code=500, content=internal_error_payload())

    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Six Cities API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy", "version": __version__}

    executor = container.get(PipelineExecutor)
    for controller_type in (OfferController, UserController):
        controller = container.get(controller_type)
        mount_routes(app, controller.routes, executor, tags=controller.tags)

    return app
