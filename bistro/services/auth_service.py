from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from bistro.config import settings
from bistro.core.errors import Unauthenticated


def create_access_token(
    claims: Dict[str, Any], expires_delta: Optional[timedelta] = None
) -> str:
    """Sign the given identity payload. This is the only place tokens are minted."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + expires_delta
    return jwt.encode(
        payload, settings.ACCESS_TOKEN_SECRET, algorithm=settings.ALGORITHM
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry and return the claims."""
    try:
        return jwt.decode(
            token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        # Covers bad signatures, malformed tokens and ExpiredSignatureError
        raise Unauthenticated() from e
