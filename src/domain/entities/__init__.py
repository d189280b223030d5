"""Domain Entities - Core business objects."""

from .loan import Loan, LoanType, generate_loan_number

__all__ = [
    "Loan",
    "LoanType",
    "generate_loan_number",
]
