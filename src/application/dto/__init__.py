"""Data Transfer Objects for application layer."""

from .loan import LoanDetails, LoanUpdate

__all__ = [
    "LoanDetails",
    "LoanUpdate",
]
