from backoffice.database.mongo import MongoStore
from fastapi.middleware.cors import CORSMiddleware
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import logging
from typing import Optional
from backoffice import config
from backoffice.config import configure_logging
from backoffice.core.exceptions import BackofficeError
from backoffice.middlewares.auth import require_auth
from contextlib import asynccontextmanager

from backoffice.routers import (
    health_check_router,
    auth_router,
    collections_router,
    search_router,
    gridfs_router,
    ui_router,
    ui_shell_router,
)

configure_logging(level=getattr(logging, config.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def build_store() -> MongoStore:
    """The MongoDB store described by the environment and the YAML settings."""
    return MongoStore(
        connection_string=config.MONGODB_URI,
        database_name=config.MONGODB_DATABASE,
        bucket_name=config.config.get_gridfs_bucket(),
        pool_options=config.config.get_pool_options(),
    )


def register_routers(app: FastAPI):
    protected = [Depends(require_auth)]

    # Health
    app.include_router(health_check_router, tags=["Health"])

    # Auth
    app.include_router(auth_router, prefix=API_PREFIX, tags=["Auth"])

    # Collections
    app.include_router(
        collections_router, prefix=API_PREFIX, tags=["Collections"], dependencies=protected
    )

    # Search
    app.include_router(
        search_router, prefix=API_PREFIX, tags=["Search"], dependencies=protected
    )

    # GridFS
    app.include_router(
        gridfs_router, prefix=API_PREFIX, tags=["GridFS"], dependencies=protected
    )

    # UI
    app.include_router(ui_shell_router, tags=["UI"])
    app.include_router(ui_router, prefix="/ui", tags=["UI"])


def register_exception_handlers(app: FastAPI):
    """Every error leaves the API as ``{"error": message}``."""

    @app.exception_handler(BackofficeError)
    async def backoffice_error_handler(request: Request, exc: BackofficeError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.info(
                f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(status_code=400, content={"error": messages})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unexpected error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(store: Optional[MongoStore] = None, debug=False, **kwargs):
    """Create and configure the FastAPI app instance."""

    logging.info("Creating FastAPI app...")
    if store is None:
        store = build_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.connect()
        logging.info("Database connection established")
        try:
            yield
        finally:
            await store.close()
            logging.info("Database connection closed")

    app = FastAPI(debug=debug, lifespan=lifespan, **kwargs)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routers(app)
    return app


app = create_app()
