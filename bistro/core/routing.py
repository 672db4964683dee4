"""Route class that turns any unexpected failure into a generic 500."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from bistro.core.errors import ApiError, internal_error_response

logger = logging.getLogger("bistro.errors")

# Handled by the application's exception handlers
_PASSTHROUGH = (ApiError, StarletteHTTPException, RequestValidationError)


class ErrorBoundaryRoute(APIRoute):
    """
    Wraps guard resolution and the endpoint call. Known API errors propagate
    to their exception handlers; anything else (database errors included) is
    logged with its traceback and answered with a fixed message.
    """

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def guarded_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except _PASSTHROUGH:
                raise
            except Exception:
                logger.exception(
                    "Unhandled error while serving request",
                    extra={"method": request.method, "path": request.url.path},
                )
                return internal_error_response()

        return guarded_route_handler
