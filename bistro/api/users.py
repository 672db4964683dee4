"""User endpoints: sign-in upsert, admin status and admin-only management."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pymongo.database import Database

from bistro.core.routing import ErrorBoundaryRoute
from bistro.database.mongo import get_db
from bistro.dtos import (
    AdminStatusResponse,
    DeleteResultResponse,
    UpdateResultResponse,
    UserUpsertRequest,
)
from bistro.middleware.auth import ADMIN_ONLY, verify_path_email
from bistro.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"], route_class=ErrorBoundaryRoute)


@router.get(
    "/admin/{email}",
    response_model=AdminStatusResponse,
    dependencies=[Depends(verify_path_email)],
)
def check_admin(email: str, db: Database = Depends(get_db)):
    service = UserService(db)
    return AdminStatusResponse(admin=service.is_admin(email))


@router.get("", dependencies=ADMIN_ONLY)
def list_users(db: Database = Depends(get_db)) -> List[Dict[str, Any]]:
    service = UserService(db)
    return service.list_users()


@router.post("", response_model=None)
def register_user(payload: UserUpsertRequest, db: Database = Depends(get_db)):
    service = UserService(db)
    return service.register(payload)


@router.patch(
    "/admin/{user_id}",
    response_model=UpdateResultResponse,
    dependencies=ADMIN_ONLY,
)
def make_admin(user_id: str, db: Database = Depends(get_db)):
    service = UserService(db)
    return service.make_admin(user_id)


@router.delete(
    "/{user_id}",
    response_model=DeleteResultResponse,
    dependencies=ADMIN_ONLY,
)
def delete_user(user_id: str, db: Database = Depends(get_db)):
    service = UserService(db)
    return service.delete_user(user_id)
