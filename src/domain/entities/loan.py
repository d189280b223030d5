"""Loan entity and loan number generation."""

import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


LOAN_NUMBER_BASE = 100_000_000_000
LOAN_NUMBER_SPREAD = 900_000_000


class LoanType(str, Enum):
    HOME = "Home Loan"
    VEHICLE = "Vehicle Loan"
    PERSONAL = "Personal Loan"
    EDUCATION = "Education Loan"


def generate_loan_number(rng: Optional[random.Random] = None) -> str:
    """
    Draw a 12-digit loan number.

    A single random draw with no collision check; uniqueness is
    enforced by the unique constraint on the loans table.
    """
    rng = rng or random
    return str(LOAN_NUMBER_BASE + rng.randrange(LOAN_NUMBER_SPREAD))


@dataclass
class Loan:
    """
    A customer loan keyed by mobile number and loan number.

    loan_id and the audit fields are assigned by the store and are
    never set by callers.
    """

    loan_number: str
    mobile_number: str
    loan_type: str
    total_loan: int
    amount_paid: int
    outstanding_amount: int
    loan_id: Optional[int] = None
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    @classmethod
    def new(
        cls,
        mobile_number: str,
        total_loan: int,
        loan_type: LoanType = LoanType.HOME,
        rng: Optional[random.Random] = None,
    ) -> "Loan":
        """Open a fresh loan with nothing repaid yet."""
        return cls(
            loan_number=generate_loan_number(rng),
            mobile_number=mobile_number,
            loan_type=loan_type.value,
            total_loan=total_loan,
            amount_paid=0,
            outstanding_amount=total_loan,
        )

    @property
    def is_settled(self) -> bool:
        return self.outstanding_amount == 0

    def apply_update(
        self,
        loan_type: str,
        total_loan: int,
        amount_paid: int,
        outstanding_amount: int,
    ) -> None:
        """Overwrite the mutable fields; identifiers stay untouched."""
        self.loan_type = loan_type
        self.total_loan = total_loan
        self.amount_paid = amount_paid
        self.outstanding_amount = outstanding_amount
