"""Public menu and review listings."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pymongo.database import Database

from bistro.core.routing import ErrorBoundaryRoute
from bistro.database.mongo import get_db
from bistro.services.catalog_service import CatalogService

router = APIRouter(tags=["Catalog"], route_class=ErrorBoundaryRoute)


@router.get("/menu")
def list_menu(db: Database = Depends(get_db)) -> List[Dict[str, Any]]:
    return CatalogService(db).list_menu()


@router.get("/reviews")
def list_reviews(db: Database = Depends(get_db)) -> List[Dict[str, Any]]:
    return CatalogService(db).list_reviews()
