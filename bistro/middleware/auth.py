"""Authentication and authorization guards for FastAPI routes.

Each guard is a dependency that either returns normally or raises, so a
route's ``dependencies`` list is an ordered chain of checks that stops at the
first failure. ``verify_admin`` and ``verify_path_email`` pull in
``verify_token`` themselves, so they are safe to list on their own.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Depends, Header, Path, Request
from pymongo.database import Database

from bistro.core.errors import Forbidden, Unauthenticated
from bistro.database.mongo import get_db
from bistro.repositories.user import UserRepository
from bistro.services.auth_service import decode_access_token


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise Unauthenticated()
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Unauthenticated()
    return parts[1]


def verify_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Dict[str, Any]:
    token = extract_bearer_token(authorization)
    claims = decode_access_token(token)
    request.state.decoded = claims
    return claims


def ensure_same_email(claims: Dict[str, Any], email: Optional[str]) -> None:
    token_email = claims.get("email")
    if token_email is None or email != token_email:
        raise Forbidden()


def verify_path_email(
    email: str = Path(...),
    claims: Dict[str, Any] = Depends(verify_token),
) -> None:
    ensure_same_email(claims, email)


def ensure_admin(db: Database, claims: Dict[str, Any]) -> None:
    # Not cached: one users read per call.
    if not UserRepository(db).is_admin(claims.get("email")):
        raise Forbidden()


def verify_admin(
    claims: Dict[str, Any] = Depends(verify_token),
    db: Database = Depends(get_db),
) -> None:
    ensure_admin(db, claims)


# Guard chain for admin-only routes
ADMIN_ONLY = [Depends(verify_token), Depends(verify_admin)]
