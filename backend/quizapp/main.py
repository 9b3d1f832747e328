import errno
import logging
import socket
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api.api import api_router
from .core.config import Settings, settings as default_settings
from .core.database import Database
from .core.exceptions import QuizAppError
from .middleware.performance import PerformanceMiddleware

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _validation_details(exc: RequestValidationError) -> list:
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({"field": ".".join(location), "message": error.get("msg", "")})
    return details


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuizAppError)
    async def quiz_app_error_handler(request: Request, exc: QuizAppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
            headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        details = _validation_details(exc)
        fields = ", ".join(d["field"] for d in details if d["field"])
        message = f"Validation failed: {fields}" if fields else "Validation failed"
        return JSONResponse(
            status_code=400,
            content={"message": message, "errors": details}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": "Server error"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred. Please try again later."}
        )


def build_lifespan(settings: Settings, database: Database):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name}...")
        await run_in_threadpool(database.wait_until_ready, settings.db_retry_delay)
        await run_in_threadpool(database.create_tables)
        logger.info(f"{settings.app_name} startup completed")

        yield

        logger.info(f"Shutting down {settings.app_name}...")
        database.dispose()

    return lifespan


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Quiz taking API: accounts, questions, scoring and result history",
        version=__version__,
        docs_url="/docs" if settings.environment == "development" else None,
        redoc_url="/redoc" if settings.environment == "development" else None,
        lifespan=build_lifespan(settings, database)
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        PerformanceMiddleware,
        slow_request_threshold=settings.slow_request_threshold
    )

    # allow_credentials cannot be combined with a wildcard origin
    allow_all = settings.cors_origins == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


def ensure_port_available(host: str, port: int) -> None:
    """Exit the process if something is already listening on the port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                logger.error(f"Port {port} is already in use, please use another port")
                sys.exit(1)
            raise


app = create_app()


def run() -> None:
    settings = app.state.settings
    ensure_port_available(settings.host, settings.port)
    logger.info(f"Server listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
