"""
Health check endpoints
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from bistro.config import settings
from bistro.core.routing import ErrorBoundaryRoute
from bistro.database.mongo import get_db
from bistro_common.mongo import ping

logger = logging.getLogger(__name__)

router = APIRouter(route_class=ErrorBoundaryRoute)


@router.get("/health")
def health_check():
    """Simple API health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.APP_NAME,
    }


@router.get("/health/db")
def database_health(db: Database = Depends(get_db)):
    """MongoDB health check."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        ping(db)
    except PyMongoError:
        logger.warning("Database ping failed", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": "disconnected",
                "timestamp": timestamp,
            },
        )

    return {
        "status": "healthy",
        "database": "connected",
        "timestamp": timestamp,
    }
