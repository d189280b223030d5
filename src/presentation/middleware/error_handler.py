"""Error handling middleware and exception handlers."""

from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import DomainException
from src.presentation.schemas import ErrorResponseSchema
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

# Friendlier messages for the fields callers most often get wrong
FIELD_MESSAGES = {
    "mobileNumber": "Mobile number must be 10 digits",
    "loanNumber": "LoanNumber must be 12 digits",
    "loanType": "LoanType can not be a null or empty",
    "totalLoan": "Total loan amount should be greater than zero",
    "amountPaid": "Total loan amount paid should be equal or greater than zero",
    "outstandingAmount": "Total outstanding amount should be equal or greater than zero",
}


def error_response(request: Request, status: HTTPStatus, message: str) -> JSONResponse:
    """Build the structured error body shared by every failure path."""
    body = ErrorResponseSchema(
        api_path=f"{request.method} {request.url.path}",
        error_code=status.name,
        error_message=message,
        error_time=datetime.now(timezone.utc),
        request_id=get_request_id(),
    )
    return JSONResponse(
        status_code=status.value,
        content=body.model_dump(mode="json", by_alias=True),
    )


def _describe_validation_error(error: dict) -> str:
    field = str(error["loc"][-1]) if error.get("loc") else ""
    if error.get("type") == "missing":
        return f"{field}: Field required"
    return f"{field}: {FIELD_MESSAGES.get(field, error.get('msg', 'Invalid value'))}"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Malformed input is a 400. Business errors that reach the boundary
    unhandled by a route are reported as 500s, as is anything else.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request validation errors."""
        message = "; ".join(_describe_validation_error(e) for e in exc.errors())
        logger.info(
            "request_validation_failed",
            request_id=get_request_id(),
            errors=message,
        )
        return error_response(request, HTTPStatus.BAD_REQUEST, message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle domain exceptions not mapped by a route."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions raised outside the request context."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(
            request,
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "An unexpected error occurred.",
        )
