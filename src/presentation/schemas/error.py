"""Pydantic schema for API error responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    api_path: str = Field(
        ...,
        description="Method and path of the failed request",
        examples=["GET /api/fetch"],
    )
    error_code: str = Field(
        ...,
        description="HTTP status name",
        examples=["INTERNAL_SERVER_ERROR"],
    )
    error_message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Loan not found with the given input data mobileNumber : '9876543210'"],
    )
    error_time: datetime = Field(
        ...,
        description="When the error occurred (UTC)",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "apiPath": "GET /api/fetch",
                    "errorCode": "INTERNAL_SERVER_ERROR",
                    "errorMessage": "Loan not found with the given input data mobileNumber : '9876543210'",
                    "errorTime": "2025-01-01T12:00:00Z",
                    "requestId": "abc123",
                }
            ]
        },
    )
