"""Application services (use cases)."""

from .base import LoanService
from .loan_service import DefaultLoanService

__all__ = [
    "LoanService",
    "DefaultLoanService",
]
