"""Request logging middleware to trace requests, durations and identity.

- Adds a unique X-Request-ID header to responses (and uses any incoming header)
- Logs method, path, status, duration, client IP and the token email
- Does not log request/response bodies to avoid leaking sensitive data
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Iterable, Optional

from jose import jwt
from jose.exceptions import JWTError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from bistro.config import settings
from bistro_common.logging import request_id_var


logger = logging.getLogger("bistro.request")


def _token_email(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.lower().startswith("bearer "):
        return None
    try:
        payload = jwt.decode(
            auth_header.split(None, 1)[1],
            settings.ACCESS_TOKEN_SECRET,
            algorithms=[settings.ALGORITHM],
        )
    except (JWTError, IndexError):
        # Rejected later by the guards if the route needs a token
        return None
    return payload.get("email")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request/response metadata for tracing.

    Paths in ``exclude_paths`` (the liveness probe) are passed through
    without a log line.
    """

    def __init__(self, app: ASGIApp, exclude_paths: Iterable[str] = ("/",)):
        super().__init__(app)
        self.exclude_paths = frozenset(exclude_paths)

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        start = time.monotonic()

        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        user_email = _token_email(request)
        client_ip = request.client.host if request.client else None

        logger.info(
            "log info: %s %s",
            request.method,
            request.url.path,
            extra={"method": request.method, "path": request.url.path},
        )

        try:
            response = await call_next(request)
        except Exception:  # pragma: no cover - we still want to log then reraise
            duration_ms = int((time.monotonic() - start) * 1000)
            logger.exception(
                "Unhandled exception during request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "client_ip": client_ip,
                    "duration_ms": duration_ms,
                    "user_email": user_email,
                },
            )
            raise
        finally:
            request_id_var.reset(token)

        duration_ms = int((time.monotonic() - start) * 1000)

        logger.info(
            "Request finished",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
                "client_ip": client_ip,
                "request_id": request_id,
                "user_email": user_email,
            },
        )

        # Return request-id to client so traces can be correlated externally
        response.headers.setdefault("X-Request-ID", request_id)
        return response
