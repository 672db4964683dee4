"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.database import Database

from bistro.api import carts, catalog, collections, health, tokens, users
from bistro.config import settings
from bistro.core.errors import ApiError, api_error_handler
from bistro.middleware.request_logging import RequestLoggingMiddleware
from bistro.repositories.user import UserRepository
from bistro_common.logging import setup_logging
from bistro_common.mongo import mongo_database, ping

logger = logging.getLogger(__name__)


def _prepare_database(db: Database) -> None:
    UserRepository(db).ensure_indexes()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application. ``database`` injects an existing handle (tests,
    scripts); otherwise a client is opened for the lifetime of the app.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            app.state.database = database
            _prepare_database(database)
            yield
            return

        with mongo_database(
            settings.mongodb_uri,
            settings.MONGODB_DB_NAME,
            server_api_version=settings.MONGODB_SERVER_API_VERSION,
        ) as db:
            ping(db)
            logger.info("Pinged your deployment. You successfully connected to MongoDB!")
            app.state.database = db
            _prepare_database(db)
            yield

    app = FastAPI(
        title=settings.APP_NAME,
        description="Menu, reviews, carts and users for the Bistro ordering site",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware, exclude_paths=("/",))

    app.add_exception_handler(ApiError, api_error_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(tokens.router)
    app.include_router(users.router)
    app.include_router(catalog.router)
    app.include_router(carts.router)
    app.include_router(collections.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness probe."""
        return "Server is running"

    return app


setup_logging(settings.LOG_LEVEL)

app = create_app()
