"""Allow-listed collection reader (``GET /m?c=<name>``)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, Query, Request
from pymongo.database import Database

from bistro.core.routing import ErrorBoundaryRoute
from bistro.database.mongo import get_db
from bistro.middleware.auth import ensure_admin, verify_token
from bistro.services.collection_service import (
    CollectionAccess,
    CollectionService,
    resolve_access,
)

router = APIRouter(tags=["Collections"], route_class=ErrorBoundaryRoute)


def authorize_collection(
    request: Request,
    c: Optional[str] = Query(None, description="Collection name"),
    authorization: Optional[str] = Header(None),
    db: Database = Depends(get_db),
) -> None:
    if resolve_access(c) is CollectionAccess.ADMIN:
        claims = verify_token(request, authorization)
        ensure_admin(db, claims)


@router.get("/m", dependencies=[Depends(authorize_collection)])
def read_collection(
    c: Optional[str] = Query(None), db: Database = Depends(get_db)
) -> List[Dict[str, Any]]:
    return CollectionService(db).dump(c)
