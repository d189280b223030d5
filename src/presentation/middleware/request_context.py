"""Request context middleware for tracing."""

import uuid
from contextvars import ContextVar
from http import HTTPStatus
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = structlog.get_logger(__name__)


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that sets up request context.

    Takes the caller's X-Request-ID (or generates one), exposes it to
    every structlog call made while handling the request and echoes it
    back in the response headers.

    Unexpected errors are turned into the 500 error body here, while the
    request ID is still bound, so infrastructure failures stay traceable.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next):
        # error_handler imports this module for get_request_id
        from .error_handler import error_response

        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.exception(
                    "unhandled_exception",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                response = error_response(
                    request,
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                    "An unexpected error occurred.",
                )

            response.headers[self.HEADER_NAME] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)
