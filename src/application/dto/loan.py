"""Data transfer objects for loan operations."""

from dataclasses import dataclass
from typing import Optional

from src.domain.entities import Loan


@dataclass(frozen=True)
class LoanUpdate:
    """Caller-supplied replacement values for an existing loan."""

    loan_number: str
    loan_type: str
    total_loan: int
    amount_paid: int
    outstanding_amount: int
    mobile_number: Optional[str] = None


@dataclass(frozen=True)
class LoanDetails:
    """Public view of a loan; audit metadata is left out."""

    loan_id: int
    loan_number: str
    mobile_number: str
    loan_type: str
    total_loan: int
    amount_paid: int
    outstanding_amount: int

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanDetails":
        return cls(
            loan_id=loan.loan_id,
            loan_number=loan.loan_number,
            mobile_number=loan.mobile_number,
            loan_type=loan.loan_type,
            total_loan=loan.total_loan,
            amount_paid=loan.amount_paid,
            outstanding_amount=loan.outstanding_amount,
        )
