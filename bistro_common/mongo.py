"""Shared MongoDB helpers for Bistro services."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator
from urllib.parse import quote_plus

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)


def build_atlas_uri(user: str, password: str, host: str, app_name: str = "Cluster0") -> str:
    """Build an Atlas SRV connection string from separate credentials."""
    return (
        f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/"
        f"?retryWrites=true&w=majority&appName={app_name}"
    )


def create_client(uri: str, server_api_version: str | None = None, **kwargs: Any) -> MongoClient:
    """
    Create a MongoClient. PyMongo pools connections internally, so one client
    is meant to be shared by the whole process.
    """
    if server_api_version:
        kwargs.setdefault(
            "server_api",
            ServerApi(server_api_version, strict=True, deprecation_errors=True),
        )
    return MongoClient(uri, **kwargs)


@contextmanager
def mongo_database(
    uri: str, db_name: str, server_api_version: str | None = None, **kwargs: Any
) -> Iterator[Database]:
    """
    Scoped database handle: the client is created on entry and closed on exit.
    Used by the application lifespan and by one-off scripts.
    """
    client = create_client(uri, server_api_version, **kwargs)
    try:
        yield client[db_name]
    finally:
        client.close()
        logger.info("MongoDB client closed")


def ping(db: Database) -> None:
    """Round-trip to the server; raises if it is unreachable."""
    db.client.admin.command("ping")
