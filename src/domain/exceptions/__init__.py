"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .loan import LoanAlreadyExistsException, ResourceNotFoundException

__all__ = [
    "DomainException",
    "LoanAlreadyExistsException",
    "ResourceNotFoundException",
]
