"""Error types raised by guards and handlers, and their HTTP rendering."""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ApiError(Exception):
    """Base error with a fixed, client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(
        self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None
    ):
        if message is not None:
            self.message = message
        self.headers = headers
        super().__init__(self.message)


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "unauthorized access"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "forbidden access"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "not found"


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "bad request"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=exc.headers,
    )


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )
