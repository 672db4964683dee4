"""MongoDB handle shared by all requests (created in the application lifespan)."""

from fastapi import Request
from pymongo.database import Database


def get_database(request: Request) -> Database:
    """Return the database handle bound to the running application."""
    return request.app.state.database


def get_db(request: Request):
    """FastAPI dependency that yields the shared database handle."""
    db = get_database(request)
    try:
        yield db
    finally:
        # The client is closed by the lifespan, not per request.
        pass
