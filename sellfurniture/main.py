"""
FastAPI application entry point.
Mounts routes, CORS, Prometheus metrics, and error handlers; the lifespan owns the database.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from sellfurniture.api.router import api_router, auth_router
from sellfurniture.config import DEFAULT_SECRET_KEY, get_settings
from sellfurniture.core.exceptions import AppError
from sellfurniture.core.logging_config import setup_logging
from sellfurniture.db.session import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: connect to the database before serving. Shutdown: release it after in-flight requests drain."""
    settings = get_settings()
    if settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not set; tokens are signed with the development default")

    database = Database.from_settings(settings)
    try:
        await database.connect()
    except Exception:
        logger.critical("Failed to connect to database; refusing to start", exc_info=True)
        await database.dispose()
        raise
    app.state.database = database
    try:
        yield
    finally:
        await database.dispose()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Field-level detail stays in the log
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Furniture marketplace backend: locations, listings, visits and token auth.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Open to any frontend origin unless CORS_ALLOW_ORIGINS narrows it
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(auth_router)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve with uvicorn on HOST:PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("sellfurniture.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
