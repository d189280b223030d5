"""Loan service interface."""

from abc import ABC, abstractmethod

from src.application.dto import LoanDetails, LoanUpdate


class LoanService(ABC):
    """Loan lifecycle use cases as seen by the API layer."""

    @abstractmethod
    async def create_loan(self, mobile_number: str) -> None:
        """
        Open a new loan for a mobile number.

        Raises:
            LoanAlreadyExistsException: If the number already has a loan
        """
        ...

    @abstractmethod
    async def fetch_loan(self, mobile_number: str) -> LoanDetails:
        """
        Raises:
            ResourceNotFoundException: If no loan exists for the number
        """
        ...

    @abstractmethod
    async def update_loan(self, update: LoanUpdate) -> bool:
        """
        Replace the mutable fields of the loan with update.loan_number.

        Raises:
            ResourceNotFoundException: If no loan has that loan number
        """
        ...

    @abstractmethod
    async def delete_loan(self, mobile_number: str) -> bool:
        """
        Raises:
            ResourceNotFoundException: If no loan exists for the number
        """
        ...
