"""Shopping cart endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, Query, Request
from pymongo.database import Database

from bistro.config import settings
from bistro.core.routing import ErrorBoundaryRoute
from bistro.database.mongo import get_db
from bistro.dtos import CartItemCreateRequest, DeleteResultResponse, InsertResultResponse
from bistro.middleware.auth import ensure_same_email, verify_token
from bistro.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Carts"], route_class=ErrorBoundaryRoute)


def verify_cart_owner(
    request: Request,
    email: str = Query(...),
    authorization: Optional[str] = Header(None),
) -> None:
    """Token and query email must match, unless the check is switched off."""
    if not settings.CART_OWNERSHIP_CHECK:
        return
    claims = verify_token(request, authorization)
    ensure_same_email(claims, email)


@router.get("", dependencies=[Depends(verify_cart_owner)])
def list_cart_items(
    email: str = Query(...), db: Database = Depends(get_db)
) -> List[Dict[str, Any]]:
    return CartService(db).list_items(email)


@router.post("", response_model=InsertResultResponse)
def add_cart_item(payload: CartItemCreateRequest, db: Database = Depends(get_db)):
    return CartService(db).add_item(payload)


@router.delete("/{item_id}", response_model=DeleteResultResponse)
def remove_cart_item(item_id: str, db: Database = Depends(get_db)):
    return CartService(db).remove_item(item_id)
