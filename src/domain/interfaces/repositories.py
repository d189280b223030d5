"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Loan


class LoanRepository(ABC):
    """
    Abstract repository for Loan persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    Store failures propagate as-is; they are not business errors.
    """

    @abstractmethod
    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        """
        Retrieve the loan registered for a mobile number.

        Args:
            mobile_number: The customer's 10-digit mobile number

        Returns:
            The loan if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        """
        Retrieve a loan by its loan number.

        Args:
            loan_number: The 12-digit loan number

        Returns:
            The loan if found, None otherwise
        """
        ...

    @abstractmethod
    async def save(self, loan: Loan) -> Loan:
        """
        Insert a new loan or fully replace an existing one.

        Args:
            loan: The loan to save; inserted when loan_id is None

        Returns:
            The saved loan with generated id and audit fields populated
        """
        ...

    @abstractmethod
    async def delete_by_id(self, loan_id: int) -> None:
        """
        Remove a loan by its surrogate identifier.

        Args:
            loan_id: The loan's primary key
        """
        ...
