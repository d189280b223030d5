"""Pydantic schemas for API request/response validation."""

from .loan import (
    LOAN_NUMBER_PATTERN,
    MOBILE_NUMBER_PATTERN,
    LoanResponseSchema,
    LoanUpdateSchema,
    StatusResponseSchema,
)
from .info import ContactInfoSchema
from .error import ErrorResponseSchema

__all__ = [
    "LOAN_NUMBER_PATTERN",
    "MOBILE_NUMBER_PATTERN",
    "LoanResponseSchema",
    "LoanUpdateSchema",
    "StatusResponseSchema",
    "ContactInfoSchema",
    "ErrorResponseSchema",
]
