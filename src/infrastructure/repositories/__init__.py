"""Repository implementations."""

from .loan_repository import PostgresLoanRepository

__all__ = [
    "PostgresLoanRepository",
]
